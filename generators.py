"""
Per-platform icon generators
Each platform declares a fixed size catalog and a filename convention

- Favicons: desktop browsers (PNG sizes + favicon.ico)
- Apple Touch Icons: iOS home screen
- Android Chrome Icons: Android home screen and PWAs
- Microsoft Tiles: Windows start menu (square + one wide tile)
"""

import asyncio
import os
from typing import List, Optional

from image_utils import create_multiple_sizes, pack_legacy_icon, run_icon_job
from logger import Logger
from models import FillColor, IconJob, OperationResult, SizeSpec


FAVICON_SIZES = [SizeSpec.square(s) for s in (16, 32, 48, 96)]

# Size whose PNG is packed into favicon.ico
FAVICON_ICO_SIZE = 32

APPLE_ICON_SIZES = [SizeSpec.square(s) for s in (57, 60, 72, 76, 114, 120, 144, 152, 180)]

# apple-touch-icon.png, referenced without a size in HTML
DEFAULT_APPLE_ICON_SIZE = SizeSpec.square(180)

ANDROID_ICON_SIZES = [SizeSpec.square(s) for s in (192, 512)]

MS_TILE_SQUARE_SIZES = [SizeSpec.square(s) for s in (70, 144, 150, 310)]
MS_TILE_WIDE_SIZE = SizeSpec(310, 150)


def _log_results(results: List[OperationResult], logger: Logger) -> None:
    for result in results:
        if result.success:
            logger.file_created(result.path)
        else:
            logger.file_error(result.path, result.error)


async def generate_favicon_pngs(
    source_image: str,
    fill_color: FillColor,
    output_dir: str,
    logger: Logger
) -> List[OperationResult]:
    """
    Generate favicon-{n}x{n}.png for 16, 32, 48 and 96

    Returns:
        One result per catalog size, in catalog order
    """
    logger.generation_start("favicon PNG files")

    results = await create_multiple_sizes(
        source_image,
        FAVICON_SIZES,
        fill_color,
        os.path.join(output_dir, "favicon-{size}x{size}.png")
    )
    _log_results(results, logger)
    return results


def find_favicon_for_ico(results: List[OperationResult]) -> Optional[OperationResult]:
    """The successful 32x32 favicon result, or None if it is missing or failed"""
    for result in results:
        if result.size == FAVICON_ICO_SIZE and result.success:
            return result
    return None


async def generate_favicon_ico(png_path: str, output_path: str, logger: Logger) -> OperationResult:
    """Pack favicon.ico from an already generated PNG"""
    logger.generation_start("favicon.ico")

    try:
        await asyncio.to_thread(pack_legacy_icon, png_path, output_path)
    except Exception as e:
        logger.file_error(output_path, str(e))
        return OperationResult(path=output_path, success=False, error=str(e))

    logger.file_created(output_path)
    return OperationResult(path=output_path, success=True)


async def generate_apple_touch_icons(
    source_image: str,
    fill_color: FillColor,
    output_dir: str,
    logger: Logger
) -> List[OperationResult]:
    """
    Generate Apple Touch Icons

    The canonical apple-touch-icon.png (180x180, flagged is_default) comes
    first, followed by apple-touch-icon-{n}x{n}.png for every catalog size.
    """
    logger.generation_start("Apple Touch Icons")

    default_job = IconJob(
        source_path=source_image,
        size=DEFAULT_APPLE_ICON_SIZE,
        fill_color=fill_color,
        dest_path=os.path.join(output_dir, "apple-touch-icon.png")
    )

    default_result, sized_results = await asyncio.gather(
        run_icon_job(default_job, is_default=True),
        create_multiple_sizes(
            source_image,
            APPLE_ICON_SIZES,
            fill_color,
            os.path.join(output_dir, "apple-touch-icon-{size}x{size}.png")
        )
    )

    results = [default_result, *sized_results]
    _log_results(results, logger)
    return results


async def generate_android_icons(
    source_image: str,
    fill_color: FillColor,
    output_dir: str,
    logger: Logger
) -> List[OperationResult]:
    """Generate android-chrome-{n}x{n}.png for 192 and 512"""
    logger.generation_start("Android Chrome Icons")

    results = await create_multiple_sizes(
        source_image,
        ANDROID_ICON_SIZES,
        fill_color,
        os.path.join(output_dir, "android-chrome-{size}x{size}.png")
    )
    _log_results(results, logger)
    return results


async def generate_microsoft_tiles(
    source_image: str,
    fill_color: FillColor,
    output_dir: str,
    logger: Logger
) -> List[OperationResult]:
    """
    Generate Microsoft Tile icons

    Four square tiles (mstile-{n}x{n}.png) followed by the wide
    mstile-310x150.png, flagged is_wide.
    """
    logger.generation_start("Microsoft Tile Icons")

    wide_job = IconJob(
        source_path=source_image,
        size=MS_TILE_WIDE_SIZE,
        fill_color=fill_color,
        dest_path=os.path.join(output_dir, f"mstile-{MS_TILE_WIDE_SIZE}.png")
    )

    square_results, wide_result = await asyncio.gather(
        create_multiple_sizes(
            source_image,
            MS_TILE_SQUARE_SIZES,
            fill_color,
            os.path.join(output_dir, "mstile-{size}x{size}.png")
        ),
        run_icon_job(wide_job, is_wide=True)
    )

    results = [*square_results, wide_result]
    _log_results(results, logger)
    return results
