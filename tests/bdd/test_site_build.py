"""Behaviour tests for publishing the EmbryoDoc landing page.

The scenarios in ``features/site_build.feature`` run the full build through
:func:`embryodoc_site.site.run_build` and inspect the emitted HTML with
BeautifulSoup. Each scenario works inside pytest's ``tmp_path`` so nothing is
written into the repository.

Usage:
    pytest tests/bdd/test_site_build.py -v
"""

from __future__ import annotations

from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from embryodoc_site.config import ProjectConfig
from embryodoc_site.site import run_build

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "site_build.feature"
scenarios(FEATURE_FILE)

HERO_TEXT = "Приложение для эмбриологов и репродуктологов"


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    output_dir: Path = scenario_state["output_dir"]  # type: ignore[assignment]
    html = (output_dir / "index.html").read_text(encoding="utf-8")
    return BeautifulSoup(html, "html.parser")


@given("the default EmbryoDoc site")
def given_default_site(scenario_state: dict[str, object]) -> None:
    """Use the built-in site metadata and presets."""
    scenario_state["project"] = ProjectConfig()


@when("I publish it to a writable folder")
def when_publish_writable(
    tmp_path: Path,
    scenario_state: dict[str, object],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Run a local-preview build into ``tmp_path / 'docs'``."""
    scenario_state["result"] = run_build(
        project=scenario_state["project"],  # type: ignore[arg-type]
        cwd=tmp_path,
    )
    scenario_state["output_dir"] = tmp_path / "docs"
    scenario_state["stdout"] = capsys.readouterr().out


@when("I publish it below a regular file")
def when_publish_unwritable(
    tmp_path: Path,
    scenario_state: dict[str, object],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Point the output folder at a path whose parent is a file."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    scenario_state["result"] = run_build(
        project=scenario_state["project"],  # type: ignore[arg-type]
        output_dir=blocker / "docs",
        cwd=tmp_path,
    )
    scenario_state["stdout"] = capsys.readouterr().out


@then("the build reports success")
def then_build_succeeds(scenario_state: dict[str, object]) -> None:
    """Check the confirmation lines and the output folder contents."""
    stdout: str = scenario_state["stdout"]  # type: ignore[assignment]
    output_dir: Path = scenario_state["output_dir"]  # type: ignore[assignment]
    assert scenario_state["result"] is not None, "expected a BuildResult"
    assert "✅ Build completed: docs/" in stdout, f"missing confirmation: {stdout!r}"
    assert "💡 Preview:" in stdout, f"missing preview hint: {stdout!r}"
    assert any(output_dir.iterdir()), "expected files in the output folder"


@then("index.html contains the hero text")
def then_index_has_hero(scenario_state: dict[str, object]) -> None:
    """The hero text is rendered as the page heading."""
    heading = _soup(scenario_state).select_one("body > h1")
    assert heading is not None, "expected an <h1> directly inside <body>"
    assert heading.get_text(strip=True) == HERO_TEXT


@then("index.html has a navigation bar with 6 links before the hero text")
def then_index_has_nav(scenario_state: dict[str, object]) -> None:
    """Navigation comes first, then the hero, then the footer."""
    body = _soup(scenario_state).body
    assert body is not None, "expected a <body> element"
    children = [child.name for child in body.find_all(recursive=False)]
    assert children == ["nav", "h1", "footer"], f"unexpected body layout {children}"
    hrefs = [anchor.get("href") for anchor in body.nav.find_all("a")]
    assert hrefs == [
        "#home",
        "#embryologists",
        "#doctors",
        "#administrators",
        "#clients",
        "#contact",
    ]


@then("the document title carries the site suffix")
def then_title_has_suffix(scenario_state: dict[str, object]) -> None:
    """The <title> is the page title followed by the site suffix."""
    title = _soup(scenario_state).title
    assert title is not None, "expected a <title> element"
    assert title.get_text() == "Главная – Приложение для эмбриологов и репродуктологов"


@then("the build error is printed")
def then_error_printed(scenario_state: dict[str, object]) -> None:
    """The failure is reported on stdout."""
    stdout: str = scenario_state["stdout"]  # type: ignore[assignment]
    assert stdout.startswith("Build failed:"), f"unexpected output {stdout!r}"
    assert "Build completed" not in stdout


@then("no result is returned")
def then_no_result(scenario_state: dict[str, object]) -> None:
    """``run_build`` returns None after a reported failure."""
    assert scenario_state["result"] is None
