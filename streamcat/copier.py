import contextlib
import pathlib
from typing import IO, Iterable, List, Optional

import httpx
import pydantic

from streamcat import config
from streamcat.log import logger

CHUNK_SIZE = 8192

copier_logger = logger.getChild("copier")


class TransferReport(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    address: str
    size: int
    status_code: Optional[int] = None


def make_client() -> httpx.Client:
    return httpx.Client(follow_redirects=True, timeout=config.HTTP_TIMEOUT)


def copy_buffer(in_buf: IO, out_buf: IO) -> int:
    """Copy ``in_buf`` into ``out_buf`` through a single reused buffer.

    Returns the number of bytes copied. ``out_buf`` is left open.
    """
    buf = bytearray(CHUNK_SIZE)
    total = 0
    with memoryview(buf) as view:
        while True:
            read = in_buf.readinto(buf)
            if not read:
                break
            out_buf.write(view[:read])
            total += read
    return total


def _copy_file(sink: IO, address: str, url: httpx.URL) -> TransferReport:
    with open(url.path, "rb") as in_buf:
        size = copy_buffer(in_buf, sink)
    return TransferReport(address=address, size=size)


def _copy_http(sink: IO, address: str, client: httpx.Client, check_status: bool) -> TransferReport:
    size = 0
    with client.stream("GET", address, follow_redirects=True) as response:
        copier_logger.debug("GET %s -> %s", address, response.status_code)
        if check_status:
            response.raise_for_status()
        for chunk in response.iter_bytes(CHUNK_SIZE):
            sink.write(chunk)
            size += len(chunk)
    return TransferReport(address=address, size=size, status_code=response.status_code)


def copy(sink: IO, address: str, client: Optional[httpx.Client] = None,
         check_status: bool = False) -> TransferReport:
    """Append the body behind ``address`` to ``sink``.

    ``address`` may be an ``http``, ``https`` or ``file`` URL. The source is
    always closed before this returns or raises; ``sink`` and a caller-supplied
    ``client`` are never closed. Errors propagate unchanged, so bytes already
    written stay in ``sink``.

    By default the response status is not checked and an error page is copied
    like any other body. Pass ``check_status=True`` to raise
    ``httpx.HTTPStatusError`` on 4xx/5xx before anything is written.
    """
    try:
        url = httpx.URL(address)
        if url.scheme == "file":
            report = _copy_file(sink, address, url)
        elif client is None:
            with make_client() as own_client:
                report = _copy_http(sink, address, own_client, check_status)
        else:
            report = _copy_http(sink, address, client, check_status)
    except Exception:
        copier_logger.error("Failed copying %s", address)
        raise
    copier_logger.info("Copied %s bytes from %s", report.size, address)
    return report


def save_to_disk(addresses: Iterable[str], path: pathlib.Path, client: Optional[httpx.Client] = None,
                 check_status: bool = False) -> List[TransferReport]:
    """Truncate ``path`` and append every address to it, one after another.

    A failure stops the run; the file keeps whatever was written before it.
    """
    with contextlib.ExitStack() as stack:
        if client is None:
            client = stack.enter_context(make_client())
        o_buf = stack.enter_context(path.open("wb"))
        return [copy(o_buf, address, client, check_status) for address in addresses]
