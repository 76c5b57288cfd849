"""
Image processing for icon generation using Pillow
Contain-fit resizing, favicon.ico packing and concurrent batch resizing
"""

import asyncio
import os
from dataclasses import replace
from typing import List, Optional, Sequence

from PIL import Image

from errors import ImageProcessingError, IconPackError
from logger import Logger
from models import FillColor, IconJob, OperationResult, SizeSpec

# Placeholder replaced by SizeSpec.token in destination patterns
SIZE_TOKEN = "{size}"

# Largest edge the ICO container can hold
MAX_ICO_EDGE = 256


def _contain_size(source_size, width: int, height: int):
    """Largest (w, h) with the source aspect ratio that fits in width x height"""
    src_w, src_h = source_size
    scale = min(width / src_w, height / src_h)
    fit_w = min(width, max(1, round(src_w * scale)))
    fit_h = min(height, max(1, round(src_h * scale)))
    return fit_w, fit_h


def resize_image(
    source_path: str,
    width: int,
    height: int,
    fill_color: FillColor,
    dest_path: str
) -> None:
    """
    Resize an image into a width x height box with contain semantics

    The source is scaled to fit entirely inside the box, keeping its aspect
    ratio, and centered on a canvas filled with fill_color. The written file
    is always exactly width x height pixels. Output format follows the
    destination extension.

    Args:
        source_path: Path to the source raster image
        width: Target width in pixels
        height: Target height in pixels
        fill_color: RGBA color for the padding area
        dest_path: Where to write the result (parent dirs are created)

    Raises:
        ImageProcessingError: invalid dimensions, undecodable source or
            unwritable destination
    """
    for name, value in (('width', width), ('height', height)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ImageProcessingError(f"Invalid target {name}: {value!r}")

    try:
        with Image.open(source_path) as img:
            img.load()
            source = img.convert('RGBA')
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageProcessingError(f"Cannot read source image {source_path}: {e}") from e

    fit_w, fit_h = _contain_size(source.size, width, height)
    if source.size != (fit_w, fit_h):
        source = source.resize((fit_w, fit_h), Image.Resampling.LANCZOS)

    canvas = Image.new('RGBA', (width, height), tuple(fill_color))
    canvas.paste(source, ((width - fit_w) // 2, (height - fit_h) // 2))

    ext = os.path.splitext(dest_path)[1].lower()
    if Image.registered_extensions().get(ext) == 'JPEG':
        canvas = canvas.convert('RGB')

    try:
        parent = os.path.dirname(dest_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        canvas.save(dest_path)
    except (OSError, ValueError) as e:
        raise ImageProcessingError(f"Cannot write {dest_path}: {e}") from e


async def resize(job: IconJob) -> OperationResult:
    """
    Run one IconJob in a worker thread

    Returns:
        Successful OperationResult for the job

    Raises:
        ImageProcessingError: propagated from resize_image
    """
    await asyncio.to_thread(
        resize_image,
        job.source_path,
        job.size.width,
        job.size.height,
        job.fill_color,
        job.dest_path
    )
    return OperationResult(path=job.dest_path, success=True, size=job.size.descriptor)


async def run_icon_job(job: IconJob, **annotations: bool) -> OperationResult:
    """Run one job and turn an ImageProcessingError into a failed result"""
    try:
        result = await resize(job)
    except ImageProcessingError as e:
        return OperationResult(
            path=job.dest_path,
            success=False,
            size=job.size.descriptor,
            error=str(e),
            annotations=dict(annotations)
        )

    if annotations:
        result = replace(result, annotations=dict(annotations))
    return result


def expand_pattern(pattern: str, size: SizeSpec) -> str:
    """Substitute every {size} token in a destination pattern"""
    return pattern.replace(SIZE_TOKEN, size.token)


async def create_multiple_sizes(
    source_path: str,
    sizes: Sequence[SizeSpec],
    fill_color: FillColor,
    dest_pattern: str
) -> List[OperationResult]:
    """
    Resize one source into several sizes concurrently

    All jobs start at once and are joined together. A failing job does not
    affect the others; its slot holds a failed result.

    Args:
        source_path: Path to the source image
        sizes: Target sizes, in the order results are wanted
        fill_color: RGBA padding color shared by all jobs
        dest_pattern: Destination path with a {size} placeholder
            (e.g. 'icons/favicon-{size}x{size}.png')

    Returns:
        One OperationResult per size, in input order
    """
    jobs = [
        IconJob(
            source_path=source_path,
            size=size,
            fill_color=fill_color,
            dest_path=expand_pattern(dest_pattern, size)
        )
        for size in sizes
    ]
    return list(await asyncio.gather(*(run_icon_job(job) for job in jobs)))


def pack_legacy_icon(png_path: str, dest_path: str) -> None:
    """
    Write a single-image favicon.ico from one raster

    Only the raster's own resolution is embedded; multi-resolution
    containers are not produced.

    Raises:
        IconPackError: if the raster cannot be read or the ICO written
    """
    try:
        with Image.open(png_path) as img:
            if getattr(img, 'n_frames', 1) != 1:
                raise IconPackError(f"{png_path} has more than one frame")
            img.load()
            frame = img.convert('RGBA')

        if max(frame.size) > MAX_ICO_EDGE:
            raise IconPackError(
                f"{png_path} is {frame.width}x{frame.height}, ICO frames are limited to {MAX_ICO_EDGE}px"
            )

        parent = os.path.dirname(dest_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        frame.save(dest_path, format='ICO', sizes=[frame.size])
    except IconPackError:
        raise
    except (OSError, ValueError) as e:
        raise IconPackError(f"Cannot pack {png_path} into {dest_path}: {e}") from e


def create_favicon_ico(png_path: str, dest_path: str, logger: Optional[Logger] = None) -> bool:
    """
    Create favicon.ico from a PNG, absorbing any failure

    Returns:
        True if the ICO was written, False otherwise
    """
    try:
        pack_legacy_icon(png_path, dest_path)
        return True
    except Exception as e:
        if logger:
            logger.error(f"Error creating favicon.ico: {e}", source=png_path, path=dest_path)
        return False
