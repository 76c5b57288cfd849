"""
Favicons generator pipeline

Generates a complete set of web icons and metadata files from one source image:
1. Favicon PNGs (16, 32, 48, 96) and favicon.ico
2. Apple Touch Icons
3. Android Chrome Icons
4. Microsoft Tile Icons
5. site.webmanifest and browserconfig.xml
6. head-instructions.html
"""

import asyncio
import os
import time
from typing import Callable, Optional

from config import (
    DEFAULT_BACKGROUND,
    DEFAULT_FILL_COLOR,
    ICONS_SUBDIR,
    ICON_URL_PATH,
    MANIFEST_DISPLAY,
    FAVICON_ICO_FILENAME,
    WEBMANIFEST_FILENAME,
    BROWSERCONFIG_FILENAME,
    HTML_INSTRUCTIONS_FILENAME,
)
from errors import GenerationError
from generators import (
    generate_favicon_pngs,
    generate_favicon_ico,
    find_favicon_for_ico,
    generate_apple_touch_icons,
    generate_android_icons,
    generate_microsoft_tiles,
)
from logger import Logger, get_logger
from models import GenerationConfig, GenerationReport, OperationResult
from templates import build_web_manifest, build_browser_config, build_html_head
from writer import ensure_directory_exists, write_content_to_file, write_json_to_file


def _write_metadata_file(path: str, write: Callable[[], None], logger: Logger) -> OperationResult:
    """Run one metadata write and record it as an OperationResult"""
    try:
        write()
    except OSError as e:
        logger.file_error(path, str(e))
        return OperationResult(path=path, success=False, error=str(e))

    logger.file_created(path)
    return OperationResult(path=path, success=True)


async def generate_icons(config: GenerationConfig, logger: Optional[Logger] = None) -> GenerationReport:
    """
    Generate every icon and metadata file for one config

    Per-file failures are recorded in the report and never abort the run.

    Args:
        config: Source image, application name, output directory, verbosity
        logger: Logger for this run (one is created from config.verbose if omitted)

    Returns:
        GenerationReport with one entry per generated file

    Raises:
        GenerationError: if the output directories cannot be created
    """
    if logger is None:
        logger = get_logger(verbose=config.verbose)

    run_start = time.time()
    fill_color = DEFAULT_FILL_COLOR
    output_dir = config.output_dir
    icons_output_dir = os.path.join(output_dir, ICONS_SUBDIR)

    try:
        ensure_directory_exists(output_dir)
        ensure_directory_exists(icons_output_dir)
    except OSError as e:
        raise GenerationError(f"Cannot create output directory {icons_output_dir}: {e}") from e

    report = GenerationReport()

    # Step 1: Favicon PNGs
    report.favicons = await generate_favicon_pngs(
        config.source_image, fill_color, icons_output_dir, logger
    )

    # Step 2: favicon.ico from the 32x32 PNG, placed at the output root
    favicon32 = find_favicon_for_ico(report.favicons)
    if favicon32:
        report.favicon_ico = await generate_favicon_ico(
            favicon32.path, os.path.join(output_dir, FAVICON_ICO_FILENAME), logger
        )
    else:
        logger.warning("No 32x32 favicon PNG found for ICO generation, skipping favicon.ico")

    # Steps 3-5: platform icons
    report.apple = await generate_apple_touch_icons(
        config.source_image, fill_color, icons_output_dir, logger
    )
    report.android = await generate_android_icons(
        config.source_image, fill_color, icons_output_dir, logger
    )
    report.microsoft = await generate_microsoft_tiles(
        config.source_image, fill_color, icons_output_dir, logger
    )

    # Step 6: site.webmanifest
    manifest_path = os.path.join(output_dir, WEBMANIFEST_FILENAME)
    manifest = build_web_manifest(
        name=config.name,
        short_name=config.name,
        theme_color=DEFAULT_BACKGROUND,
        background_color=DEFAULT_BACKGROUND,
        display=MANIFEST_DISPLAY,
        icon_path=ICON_URL_PATH,
    )
    report.webmanifest = _write_metadata_file(
        manifest_path, lambda: write_json_to_file(manifest_path, manifest), logger
    )

    # Step 7: browserconfig.xml
    browserconfig_path = os.path.join(output_dir, BROWSERCONFIG_FILENAME)
    browserconfig = build_browser_config(tile_color=DEFAULT_BACKGROUND, icon_path=ICON_URL_PATH)
    report.browserconfig = _write_metadata_file(
        browserconfig_path, lambda: write_content_to_file(browserconfig_path, browserconfig), logger
    )

    # Step 8: HTML head instructions
    html_path = os.path.join(output_dir, HTML_INSTRUCTIONS_FILENAME)
    html_head = build_html_head(
        theme_color=DEFAULT_BACKGROUND,
        tile_color=DEFAULT_BACKGROUND,
        icon_path=ICON_URL_PATH,
        include_apple_sizes=True,
    )
    report.html_instructions = _write_metadata_file(
        html_path, lambda: write_content_to_file(html_path, html_head), logger
    )

    failed = report.failed_results()
    duration_ms = int((time.time() - run_start) * 1000)
    logger.info(
        f"Generation finished: {len(report.all_results()) - len(failed)}/{len(report.all_results())} files created",
        failed_count=len(failed),
        duration_ms=duration_ms
    )

    return report


def generate(config: GenerationConfig, logger: Optional[Logger] = None) -> GenerationReport:
    """Synchronous entry point: run generate_icons in its own event loop"""
    return asyncio.run(generate_icons(config, logger))
