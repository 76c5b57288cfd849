"""
Builders for the metadata files that reference the generated icons:
site.webmanifest, browserconfig.xml and the HTML head snippet
"""

from typing import Dict, Any, List

from config import ICON_URL_PATH, MANIFEST_DISPLAY
from generators import ANDROID_ICON_SIZES, APPLE_ICON_SIZES


def build_web_manifest(
    name: str,
    short_name: str,
    theme_color: str,
    background_color: str,
    display: str = MANIFEST_DISPLAY,
    icon_path: str = ICON_URL_PATH
) -> Dict[str, Any]:
    """Web app manifest listing the Android Chrome icons"""
    icons = [
        {
            "src": f"{icon_path}/android-chrome-{size}.png",
            "sizes": str(size),
            "type": "image/png",
        }
        for size in ANDROID_ICON_SIZES
    ]

    return {
        "name": name,
        "short_name": short_name,
        "icons": icons,
        "theme_color": theme_color,
        "background_color": background_color,
        "display": display,
    }


def build_browser_config(tile_color: str, icon_path: str = ICON_URL_PATH) -> str:
    """browserconfig.xml for Windows tiles"""
    return f"""<?xml version="1.0" encoding="utf-8"?>
<browserconfig>
    <msapplication>
        <tile>
            <square70x70logo src="{icon_path}/mstile-70x70.png"/>
            <square150x150logo src="{icon_path}/mstile-150x150.png"/>
            <square310x310logo src="{icon_path}/mstile-310x310.png"/>
            <wide310x150logo src="{icon_path}/mstile-310x150.png"/>
            <TileColor>{tile_color}</TileColor>
        </tile>
    </msapplication>
</browserconfig>"""


def build_html_head(
    theme_color: str,
    tile_color: str,
    icon_path: str = ICON_URL_PATH,
    include_apple_sizes: bool = True
) -> str:
    """
    HTML <link>/<meta> tags for every generated asset

    The snippet is meant to be pasted into the page <head>.
    """
    lines: List[str] = [
        "<!-- favicon -->",
        f'<link rel="icon" type="image/png" sizes="32x32" href="{icon_path}/favicon-32x32.png">',
        f'<link rel="icon" type="image/png" sizes="16x16" href="{icon_path}/favicon-16x16.png">',
        f'<link rel="icon" type="image/png" sizes="96x96" href="{icon_path}/favicon-96x96.png">',
        "",
        "<!-- Apple Touch Icons -->",
        f'<link rel="apple-touch-icon" sizes="180x180" href="{icon_path}/apple-touch-icon.png">',
    ]

    if include_apple_sizes:
        for size in APPLE_ICON_SIZES:
            lines.append(
                f'<link rel="apple-touch-icon" sizes="{size}" href="{icon_path}/apple-touch-icon-{size}.png">'
            )
        lines.append("")

    lines.extend([
        "<!-- Web App Manifest -->",
        '<link rel="manifest" href="/site.webmanifest">',
        "",
        "<!-- Microsoft Tiles -->",
        '<meta name="msapplication-config" content="/browserconfig.xml">',
        f'<meta name="msapplication-TileColor" content="{tile_color}">',
        f'<meta name="msapplication-TileImage" content="{icon_path}/mstile-144x144.png">',
        "",
        "<!-- Theme Colors -->",
        f'<meta name="theme-color" content="{theme_color}">',
    ])

    return "\n".join(lines)
