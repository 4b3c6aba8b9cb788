"""
Integration tests for the site builder - writes real files under tmp_path.
"""

from datetime import datetime

import pytest
from loguru import logger
from omegaconf import OmegaConf

from folio.contexts.rendering import build_site, copy_static_assets, write_site


@pytest.fixture
def content_file(tmp_path, sample_content):
    path = tmp_path / "site.yaml"
    OmegaConf.save(OmegaConf.create(sample_content), path)
    return path


@pytest.mark.integration
def test_build_site_writes_pages(tmp_path, content_file):
    """Test a full build writes one index.html per page and a log file."""
    output_dir = tmp_path / "site"
    log_dir = tmp_path / "logs"

    result = build_site(content_path=content_file, output_dir=output_dir, log_dir=log_dir)

    assert result.success, f"Build failed with errors: {result.errors}"
    assert result.errors == []
    assert set(result.pages) == {"career", "portfolio"}
    assert result.pages["career"] == output_dir.resolve() / "career" / "index.html"

    for page_path in result.pages.values():
        assert page_path.exists()
        assert page_path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")

    assert "Trip Planner" in result.pages["portfolio"].read_text(encoding="utf-8")
    assert (log_dir / "render.log").exists()
    assert datetime.fromisoformat(result.built_at)


@pytest.mark.integration
def test_build_site_missing_content(tmp_path):
    """Test a missing content file fails the build without raising."""
    result = build_site(
        content_path=tmp_path / "missing.yaml",
        output_dir=tmp_path / "site",
        log_dir=tmp_path / "logs",
    )

    assert not result.success
    assert len(result.errors) == 1
    assert "not found" in result.errors[0]
    assert result.pages == {}


@pytest.mark.integration
def test_build_site_invalid_content(tmp_path, sample_content):
    """Test content definition errors are reported with their location."""
    del sample_content["careers"][1]["duration"]
    content_file = tmp_path / "site.yaml"
    OmegaConf.save(OmegaConf.create(sample_content), content_file)

    result = build_site(
        content_path=content_file, output_dir=tmp_path / "site", log_dir=tmp_path / "logs"
    )

    assert not result.success
    assert result.errors == ["careers[1].duration: Missing required field"]
    assert not (tmp_path / "site" / "career").exists()


@pytest.mark.integration
def test_build_site_copies_static_assets(tmp_path, content_file):
    static_dir = tmp_path / "assets"
    (static_dir / "images" / "portfolio").mkdir(parents=True)
    (static_dir / "images" / "portfolio" / "home.png").write_bytes(b"\x89PNG")

    result = build_site(
        content_path=content_file,
        output_dir=tmp_path / "site",
        static_dir=static_dir,
        log_dir=tmp_path / "logs",
    )

    assert result.success, f"Build failed with errors: {result.errors}"
    assert (tmp_path / "site" / "static" / "images" / "portfolio" / "home.png").exists()


@pytest.mark.integration
def test_build_site_missing_static_dir(tmp_path, content_file):
    result = build_site(
        content_path=content_file,
        output_dir=tmp_path / "site",
        static_dir=tmp_path / "no-assets",
        log_dir=tmp_path / "logs",
    )

    assert not result.success
    assert "Static asset directory not found" in result.errors[0]


@pytest.mark.integration
def test_write_site_overwrites(tmp_path):
    """Test rebuilding replaces previously written pages."""
    write_site({"career": "<p>old</p>"}, tmp_path)
    written = write_site({"career": "<p>new</p>"}, tmp_path)

    assert written["career"].read_text(encoding="utf-8") == "<p>new</p>"


@pytest.mark.integration
def test_copy_static_assets_merges_into_existing(tmp_path):
    static_dir = tmp_path / "assets"
    static_dir.mkdir()
    (static_dir / "a.txt").write_text("a")
    output_dir = tmp_path / "site"
    (output_dir / "static").mkdir(parents=True)
    (output_dir / "static" / "b.txt").write_text("b")

    target = copy_static_assets(static_dir, output_dir)

    assert sorted(path.name for path in target.iterdir()) == ["a.txt", "b.txt"]


@pytest.mark.integration
@pytest.mark.parametrize(
    "text",
    [
        "profile: {name: A, role: B\ncareers: [\n",
        "profile: {name: '${missing}', role: B}\n",
    ],
)
def test_build_site_unreadable_yaml(tmp_path, text):
    """Test YAML syntax and interpolation errors fail the build without raising."""
    content_file = tmp_path / "site.yaml"
    content_file.write_text(text, encoding="utf-8")

    result = build_site(
        content_path=content_file, output_dir=tmp_path / "site", log_dir=tmp_path / "logs"
    )

    assert not result.success
    assert len(result.errors) == 1
    assert result.errors[0].startswith(f"{content_file}: Could not read content file")


@pytest.mark.integration
def test_build_log_header_records_inputs(tmp_path, content_file):
    """Test the build log names the content file and output directory."""
    output_dir = tmp_path / "site"
    log_dir = tmp_path / "logs"

    build_site(content_path=content_file, output_dir=output_dir, log_dir=log_dir)
    logger.remove()

    log_text = (log_dir / "render.log").read_text(encoding="utf-8")
    assert f"Content file: {content_file}" in log_text
    assert f"Output directory: {output_dir.resolve()}" in log_text
    assert "[render] Site build succeeded" in log_text
