import pathlib

import streamcat.config as config
import streamcat.copier as copier
import streamcat.log as log


def main():
    path = pathlib.Path(config.OUTPUT_PATH)
    log.logger.info("Concatenating %d sources into %s", len(config.SOURCE_URLS), path)
    reports = copier.save_to_disk(config.SOURCE_URLS, path, check_status=config.CHECK_STATUS)
    log.logger.info("Wrote %s bytes to %s", sum(report.size for report in reports), path)
    return reports


if __name__ == "__main__":
    main()
