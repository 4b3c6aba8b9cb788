"""
Site Builder

Writes composed pages to the output directory as static files:

    <output_dir>/career/index.html
    <output_dir>/portfolio/index.html
    <output_dir>/static/...          (when a static asset directory is given)
"""

import os
import shutil
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from jinja2 import TemplateNotFound

from folio.contexts.content.content_store import (
    SITE_CONTENT_PATH,
    ContentStore,
    load_content_store,
)
from folio.contexts.content.exceptions import ContentDefinitionError
from folio.contexts.rendering.logger import (
    _log_debug,
    _log_info,
    log_build_result,
    log_build_start,
    setup_rendering_logger,
)
from folio.contexts.templating.exceptions import TemplateRenderError
from folio.contexts.templating.page_composer import PageComposer
from folio.utils.timestamp import now

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path(__file__).resolve().parents[3]))
SITE_OUTPUT_PATH = Path(os.getenv("SITE_OUTPUT_PATH", PROJECT_ROOT / "outs" / "site"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", PROJECT_ROOT / "outs" / "logs"))
SITE_STATIC_PATH = Path(os.getenv("SITE_STATIC_PATH")) if os.getenv("SITE_STATIC_PATH") else None

PAGE_FILENAME = "index.html"
STATIC_DIRNAME = "static"


@dataclass
class BuildResult:
    """
    Result of a site build.

    Attributes:
        success: Whether every page was written
        output_dir: Site output directory
        pages: Page name -> written file path
        errors: Error messages (content definition, template, asset problems)
        log_dir: Directory holding render.log for this build
        built_at: ISO 8601 timestamp of the build
    """

    success: bool
    output_dir: Optional[Path] = None
    pages: Dict[str, Path] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    log_dir: Optional[Path] = None
    built_at: Optional[str] = None


def write_site(rendered_pages: Dict[str, str], output_dir: Path) -> Dict[str, Path]:
    """
    Write rendered pages as <output_dir>/<page name>/index.html.

    Parent directories are created as needed; existing files are overwritten.

    Args:
        rendered_pages: Page name -> HTML document
        output_dir: Site output directory

    Returns:
        Page name -> written file path
    """
    written = {}
    for page_name, html in rendered_pages.items():
        page_path = Path(output_dir) / page_name / PAGE_FILENAME
        page_path.parent.mkdir(parents=True, exist_ok=True)
        page_path.write_text(html, encoding="utf-8")
        _log_debug(f"Wrote {page_path}")
        written[page_name] = page_path
    return written


def export_store(
    store: ContentStore, output_dir: Path, composer: PageComposer = None
) -> Dict[str, Path]:
    """
    Render every page of a content store and write it to output_dir.

    Args:
        store: Content store
        output_dir: Site output directory
        composer: PageComposer to use (default: new PageComposer())

    Returns:
        Page name -> written file path
    """
    composer = composer or PageComposer()
    return write_site(composer.render_site(store), output_dir)


def copy_static_assets(static_dir: Path, output_dir: Path) -> Path:
    """
    Copy a static asset directory to <output_dir>/static.

    The images referenced as /static/images/<category>/<file> live here.

    Raises:
        FileNotFoundError: If static_dir does not exist
    """
    static_dir = Path(static_dir)
    if not static_dir.is_dir():
        raise FileNotFoundError(f"Static asset directory not found: {static_dir}")

    target = Path(output_dir) / STATIC_DIRNAME
    shutil.copytree(static_dir, target, dirs_exist_ok=True)
    _log_info(f"Copied static assets to {target}")
    return target


def build_site(
    content_path: Path = None,
    output_dir: Path = None,
    static_dir: Path = None,
    log_dir: Path = None,
    composer: PageComposer = None,
) -> BuildResult:
    """
    Build the static site from a content file.

    Loads the content store, composes and renders every page, writes them
    under output_dir and copies static assets. Content definition errors,
    template errors and missing files are reported in the result rather than
    raised.

    Args:
        content_path: Content YAML (default: SITE_CONTENT_PATH)
        output_dir: Output directory (default: SITE_OUTPUT_PATH)
        static_dir: Static asset directory to copy (default: SITE_STATIC_PATH, may be unset)
        log_dir: Log directory (default: LOGS_PATH/build_<timestamp>)
        composer: PageComposer to use (default: new PageComposer())

    Returns:
        BuildResult with success status and written pages
    """
    content_path = Path(content_path or SITE_CONTENT_PATH)
    output_dir = Path(output_dir or SITE_OUTPUT_PATH).resolve()
    static_dir = static_dir or SITE_STATIC_PATH
    log_dir = Path(log_dir) if log_dir is not None else LOGS_PATH / f"build_{now()}"

    setup_rendering_logger(log_dir, content_path, output_dir)
    log_build_start(content_path, output_dir)

    result = BuildResult(
        success=False,
        output_dir=output_dir,
        log_dir=log_dir,
        built_at=datetime.now().isoformat(),
    )
    start_time = time.time()

    try:
        store = load_content_store(content_path)
        result.pages = export_store(store, output_dir, composer)
        if static_dir:
            copy_static_assets(static_dir, output_dir)
    except (FileNotFoundError, ContentDefinitionError) as e:
        result.errors.append(str(e))
    except (TemplateRenderError, TemplateNotFound) as e:
        result.errors.append(f"Template error: {e}")
    else:
        result.success = True

    log_build_result(result, time.time() - start_time)
    return result
