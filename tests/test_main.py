import json
import os

import pytest
from unittest.mock import patch, AsyncMock
from PIL import Image

import main
from errors import GenerationError
from logger import Logger
from main import generate, generate_icons
from models import GenerationConfig, OperationResult

EXPECTED_ICON_FILES = (
    [f"favicon-{s}x{s}.png" for s in (16, 32, 48, 96)]
    + ["apple-touch-icon.png"]
    + [f"apple-touch-icon-{s}x{s}.png" for s in (57, 60, 72, 76, 114, 120, 144, 152, 180)]
    + [f"android-chrome-{s}x{s}.png" for s in (192, 512)]
    + [f"mstile-{s}x{s}.png" for s in (70, 144, 150, 310)]
    + ["mstile-310x150.png"]
)

METADATA_FILES = ["browserconfig.xml", "site.webmanifest", "head-instructions.html"]


def _config(source, output_dir, name="Demo"):
    return GenerationConfig(source_image=source, name=name, output_dir=str(output_dir), verbose=False)


class TestGenerateIcons:

    def test_full_output_layout(self, wide_jpeg, tmp_path):
        out = tmp_path / "static"

        report = generate(_config(wide_jpeg, out))

        assert report.success is True
        assert sorted(os.listdir(out)) == sorted(METADATA_FILES + ["favicon.ico", "icons"])
        assert sorted(os.listdir(out / "icons")) == sorted(EXPECTED_ICON_FILES)
        assert report.favicon_ico.path == str(out / "favicon.ico")
        assert len(report.all_results()) == len(EXPECTED_ICON_FILES) + 1 + len(METADATA_FILES)

    def test_report_shape(self, source_png, tmp_path):
        report = generate(_config(source_png, tmp_path / "out"))

        assert len(report.favicons) == 4
        assert len(report.apple) == 10
        assert len(report.android) == 2
        assert len(report.microsoft) == 5
        data = report.to_dict()
        assert set(data) == {
            "favicons", "apple", "android", "microsoft",
            "webmanifest", "browserconfig", "html_instructions",
        }
        assert data["apple"][0]["is_default"] is True
        assert data["microsoft"][-1]["is_wide"] is True

    def test_webmanifest_content(self, source_png, tmp_path):
        out = tmp_path / "out"

        generate(_config(source_png, out, name="My App"))

        manifest = json.loads((out / "site.webmanifest").read_text(encoding="utf-8"))
        assert manifest == {
            "name": "My App",
            "short_name": "My App",
            "icons": [
                {"src": "/icons/android-chrome-192x192.png", "sizes": "192x192", "type": "image/png"},
                {"src": "/icons/android-chrome-512x512.png", "sizes": "512x512", "type": "image/png"},
            ],
            "theme_color": "#ffffff00",
            "background_color": "#ffffff00",
            "display": "standalone",
        }

    def test_unreadable_source_marks_every_image_failed(self, corrupt_image, tmp_path):
        out = tmp_path / "out"

        report = generate(_config(corrupt_image, out))

        assert len(report.favicons) == 4
        assert all(not r.success for r in report.favicons)
        assert all(not r.success for r in report.apple + report.android + report.microsoft)
        # favicon.ico is skipped, not failed
        assert report.favicon_ico is None
        assert not (out / "favicon.ico").exists()
        # metadata files do not depend on the rasters
        assert report.webmanifest.success
        assert report.browserconfig.success
        assert report.html_instructions.success
        assert report.success is False

    def test_metadata_files_are_idempotent(self, source_png, tmp_path):
        out = tmp_path / "out"
        config = _config(source_png, out)

        first = generate(config)
        first_bytes = {name: (out / name).read_bytes() for name in METADATA_FILES}
        second = generate(config)
        second_bytes = {name: (out / name).read_bytes() for name in METADATA_FILES}

        assert first_bytes == second_bytes
        assert [r.success for r in first.all_results()] == [r.success for r in second.all_results()]
        for result in second.favicons + second.apple + second.android + second.microsoft:
            with Image.open(result.path) as img:
                if isinstance(result.size, int):
                    assert img.size == (result.size, result.size)
                else:
                    assert "x".join(map(str, img.size)) == result.size

    def test_uncreatable_output_dir_raises(self, source_png, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(GenerationError):
            generate(_config(source_png, blocker))

    def test_uncreatable_output_dir_raises_before_any_job(self, source_png, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with patch.object(main, "generate_favicon_pngs", new=AsyncMock()) as favicons:
            with pytest.raises(GenerationError):
                generate(_config(source_png, blocker / "nested"))

        favicons.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_32_favicon_skips_ico(self, source_png, tmp_path):
        out = tmp_path / "out"
        failed_favicons = [
            OperationResult(path=str(out / "icons" / "favicon-16x16.png"), success=True, size=16),
            OperationResult(path=str(out / "icons" / "favicon-32x32.png"), success=False, size=32, error="boom"),
        ]
        logger = Logger(verbose=False)

        with patch.object(main, "generate_favicon_pngs", new=AsyncMock(return_value=failed_favicons)), \
             patch.object(main, "generate_favicon_ico", new=AsyncMock()) as ico:
            report = await generate_icons(_config(source_png, out), logger)

        ico.assert_not_called()
        assert report.favicon_ico is None
        assert report.favicons == failed_favicons
        assert len(report.microsoft) == 5
        warnings = [e for e in logger.get_logs() if e["level"] == "WARNING"]
        assert len(warnings) == 1
        assert "32x32" in warnings[0]["message"]

    @pytest.mark.asyncio
    async def test_programming_error_in_generator_propagates(self, source_png, tmp_path):
        with patch.object(main, "generate_android_icons", new=AsyncMock(side_effect=TypeError("bad"))):
            with pytest.raises(TypeError):
                await generate_icons(_config(source_png, tmp_path / "out"), Logger(verbose=False))

    @pytest.mark.asyncio
    async def test_metadata_write_failure_is_recorded(self, source_png, tmp_path):
        out = tmp_path / "out"
        (out / "browserconfig.xml").mkdir(parents=True)

        report = await generate_icons(_config(source_png, out), Logger(verbose=False))

        assert report.browserconfig.success is False
        assert report.browserconfig.error
        assert report.webmanifest.success is True
        assert report.html_instructions.success is True
