import asyncio
import sys
from typing import List, Optional

import aiohttp
import ujson as json
import uvloop

from core.args import Args, parse_args
from core.configs import ExtractorConfig
from core.logger import init_logger, info, error, exception
from sectext.extractor.downloader import open_remote_pdf
from sectext.extractor.errors import ExtractionError, SectionNotFound, SourceUnavailable
from sectext.extractor.pdf_source import AsyncPDFFragmentSource, PDFFragmentSource
from sectext.extractor.results import ExtractionResult
from sectext.extractor.section_extractor import (
    extract_scoped_section,
    extract_section,
    extract_section_async,
)


EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_SOURCE_UNAVAILABLE = 2
EXIT_INTERNAL_ERROR = 3


def load_config(args: Args) -> ExtractorConfig:
    config = ExtractorConfig.load(args.config)
    if args.strict_boundary:
        config.strict_boundary = True
    return config


def extract_from_file(args: Args, config: ExtractorConfig) -> ExtractionResult:
    with PDFFragmentSource.from_path(args.pdf) as source:
        if args.scoped:
            return extract_scoped_section(args.section, source, config)
        return extract_section(args.section, source, config)


async def extract_from_url(args: Args, config: ExtractorConfig) -> ExtractionResult:
    url = args.url or config.default_pdf_url

    async with aiohttp.ClientSession() as session:
        source: AsyncPDFFragmentSource = await open_remote_pdf(
            session,
            url,
            timeout_s=config.download_timeout_s,
            max_bytes=config.max_download_bytes,
        )

    try:
        if args.scoped:
            return await asyncio.to_thread(extract_scoped_section, args.section, source.sync_source, config)
        return await extract_section_async(args.section, source, config)
    finally:
        source.close()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    init_logger(args.DEBUG)
    info("Logger initialized")

    try:
        config = load_config(args)

        if args.pdf is not None:
            result = extract_from_file(args, config)
        else:
            result = uvloop.run(extract_from_url(args, config))

    except SectionNotFound as e:
        error(str(e))
        return EXIT_NOT_FOUND
    except SourceUnavailable as e:
        error(f"Document unavailable: {e}")
        return EXIT_SOURCE_UNAVAILABLE
    except ExtractionError as e:
        error(str(e))
        return EXIT_INTERNAL_ERROR
    except Exception as e:
        exception(f"Unexpected error: {e}")
        return EXIT_INTERNAL_ERROR

    if result.truncated:
        info(f"Section {result.identifier} may run past its real end (truncated)")

    sys.stdout.write(json.dumps(result.to_dict(), ensure_ascii=False, indent=2) + "\n")
    sys.stdout.flush()
    return EXIT_OK


if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
