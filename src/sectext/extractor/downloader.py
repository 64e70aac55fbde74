"""
Download of remote PDF documents.
"""
import asyncio
from typing import Optional
from urllib.parse import urlparse
from pathlib import PurePosixPath

import aiohttp

from core.logger import error, info
from sectext.extractor.errors import SourceUnavailable
from sectext.extractor.pdf_source import AsyncPDFFragmentSource


CHUNK_SIZE = 64 * 1024


async def download_pdf(
        session: aiohttp.ClientSession,
        url: str,
        timeout_s: float = 60.0,
        max_bytes: Optional[int] = None,
) -> bytes:
    """
    Fetch a PDF document over HTTP.

    Args:
        session: aiohttp session to issue the request with
        url: Document URL
        timeout_s: Total time allowed for the request and body
        max_bytes: Optional cap on the document size

    Returns:
        The raw document bytes.

    Raises:
        SourceUnavailable: on non-200 responses, timeouts, connection errors
            or documents larger than max_bytes.
    """
    info(f"Downloading {url}")
    timeout = aiohttp.ClientTimeout(total=timeout_s)

    try:
        async with session.get(url, timeout=timeout) as resp:
            if resp.status != 200:
                text = f"Error downloading {url}: HTTP {resp.status}"
                error(text)
                raise SourceUnavailable(text)

            chunks = []
            size = 0
            async for chunk in resp.content.iter_chunked(CHUNK_SIZE):
                size += len(chunk)
                if max_bytes is not None and size > max_bytes:
                    raise SourceUnavailable(f"{url} is larger than {max_bytes} bytes")
                chunks.append(chunk)

    except asyncio.TimeoutError as e:
        raise SourceUnavailable(f"Timed out after {timeout_s}s downloading {url}") from e
    except aiohttp.ClientError as e:
        raise SourceUnavailable(f"Error downloading {url}: {e}") from e

    info(f"Downloaded {size} bytes from {url}")
    return b"".join(chunks)


def file_name_from_url(url: str) -> str:
    name = PurePosixPath(urlparse(url).path).name
    return name or "document.pdf"


async def open_remote_pdf(
        session: aiohttp.ClientSession,
        url: str,
        timeout_s: float = 60.0,
        max_bytes: Optional[int] = None,
) -> AsyncPDFFragmentSource:
    file_data = await download_pdf(session, url, timeout_s, max_bytes)
    return await asyncio.to_thread(AsyncPDFFragmentSource.from_bytes, file_data, file_name_from_url(url))
