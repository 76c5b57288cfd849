"""
Type definitions for the favicons generator
Dataclasses for sizes, icon jobs, operation results and the generation report
"""

import os
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Tuple, Union, Any

from config import DEFAULT_OUTPUT_DIR
from errors import ValidationError


# RGBA, each channel 0..255
FillColor = Tuple[int, int, int, int]


# ============================================================================
# SIZES AND JOBS
# ============================================================================

@dataclass(frozen=True)
class SizeSpec:
    """Target geometry of one icon, square or rectangular"""
    width: int
    height: int

    @classmethod
    def square(cls, edge: int) -> "SizeSpec":
        return cls(edge, edge)

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    @property
    def token(self) -> str:
        """String substituted for {size} in filename patterns"""
        if self.is_square:
            return str(self.width)
        return f"{self.width}x{self.height}"

    @property
    def descriptor(self) -> Union[int, str]:
        """Edge length for squares, "WxH" for rectangles"""
        if self.is_square:
            return self.width
        return f"{self.width}x{self.height}"

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class IconJob:
    """One resize request, consumed once by the resize primitive"""
    source_path: str
    size: SizeSpec
    fill_color: FillColor
    dest_path: str


# ============================================================================
# RESULTS
# ============================================================================

@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of one image job or one metadata file write

    Attributes:
        path: Destination path of the file
        success: Whether the file was written
        size: Edge length or "WxH" for image jobs, None for plain file writes
        error: Error message if the operation failed
        annotations: Platform flags such as is_default (canonical touch icon)
            or is_wide (rectangular tile)
    """
    path: str
    success: bool
    size: Optional[Union[int, str]] = None
    error: Optional[str] = None
    annotations: Dict[str, bool] = field(default_factory=dict)

    @property
    def is_default(self) -> bool:
        return self.annotations.get('is_default', False)

    @property
    def is_wide(self) -> bool:
        return self.annotations.get('is_wide', False)

    def to_dict(self) -> Dict[str, Any]:
        data = {'path': self.path, 'success': self.success}
        if self.size is not None:
            data['size'] = self.size
        if self.error is not None:
            data['error'] = self.error
        data.update(self.annotations)
        return data


@dataclass
class GenerationReport:
    """
    Aggregated results of one generation run.

    The set of fields is fixed; only success flags and errors vary per run.
    Optional entries stay None when their step never ran (e.g. favicon.ico
    when no 32x32 favicon was produced).
    """
    favicons: List[OperationResult] = field(default_factory=list)
    favicon_ico: Optional[OperationResult] = None
    apple: List[OperationResult] = field(default_factory=list)
    android: List[OperationResult] = field(default_factory=list)
    microsoft: List[OperationResult] = field(default_factory=list)
    webmanifest: Optional[OperationResult] = None
    browserconfig: Optional[OperationResult] = None
    html_instructions: Optional[OperationResult] = None

    def all_results(self) -> List[OperationResult]:
        """Every recorded result, in generation order"""
        results = list(self.favicons)
        if self.favicon_ico is not None:
            results.append(self.favicon_ico)
        results.extend(self.apple)
        results.extend(self.android)
        results.extend(self.microsoft)
        for entry in (self.webmanifest, self.browserconfig, self.html_instructions):
            if entry is not None:
                results.append(entry)
        return results

    def failed_results(self) -> List[OperationResult]:
        return [r for r in self.all_results() if not r.success]

    @property
    def success(self) -> bool:
        return not self.failed_results()

    def to_dict(self) -> Dict[str, Any]:
        def single(entry):
            return entry.to_dict() if entry is not None else None

        return {
            'favicons': {
                'png': [r.to_dict() for r in self.favicons],
                'ico': single(self.favicon_ico),
            },
            'apple': [r.to_dict() for r in self.apple],
            'android': [r.to_dict() for r in self.android],
            'microsoft': [r.to_dict() for r in self.microsoft],
            'webmanifest': single(self.webmanifest),
            'browserconfig': single(self.browserconfig),
            'html_instructions': single(self.html_instructions),
        }


# ============================================================================
# CONFIG
# ============================================================================

@dataclass(frozen=True)
class GenerationConfig:
    """User-level input for one run"""
    source_image: str
    name: str
    output_dir: str = DEFAULT_OUTPUT_DIR
    verbose: bool = False

    def validate(self, check_source: bool = True) -> None:
        """
        Check the config before any job is created

        Raises:
            ValidationError: on the first problem found
        """
        if not self.source_image:
            raise ValidationError("Source image path is required", field="source_image")
        if not self.name or not self.name.strip():
            raise ValidationError("Application name is required", field="name")
        if not self.output_dir:
            raise ValidationError("Output directory is required", field="output_dir")
        if check_source and not os.path.isfile(self.source_image):
            raise ValidationError(
                f'Source image "{self.source_image}" not found',
                field="source_image"
            )
