"""End-to-end tests for the main workflow."""

import json
import unittest
from importlib.metadata import PackageNotFoundError
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from pyfakefs.fake_filesystem_unittest import TestCase  # type: ignore[import-not-found]

from doclocale import _get_version
from doclocale.config import DocLocaleConfig
from doclocale.errors import ExtractionError, SnapshotFormatError
from doclocale.injection_state import InjectionStatus
from doclocale.models import RunMode
from doclocale.reflections import ProjectReflection
from doclocale.workflow import build_pipeline, run_mode

ROOT = Path("/project")
TYPEDOC_JSON = ROOT / "docs" / "typedoc.json"
STAGING = ROOT / "translations" / "staging" / "fr" / "translation.json"
PROD_DIR = ROOT / "translations" / "prod" / "fr"
OUTPUT_JSON = ROOT / "docs" / "typedoc.fr.json"


def _tree(description: str = "Do the thing.") -> dict:
    return {
        "id": 0,
        "name": "my-lib",
        "kind": 1,
        "children": [
            {
                "id": 1,
                "name": "Widget",
                "kind": 128,
                "groups": [{"title": "Methods", "children": [2]}, {"title": "Lifecycle", "children": [2]}],
                "children": [
                    {
                        "id": 2,
                        "name": "run",
                        "kind": 2048,
                        "sources": [{"fileName": "src/widget.ts", "line": 12}],
                        "comment": {
                            "summary": [{"kind": "text", "text": "Runs the widget."}],
                            "blockTags": [{"tag": "@description", "content": [{"kind": "text", "text": description}]}],
                        },
                    },
                ],
            },
        ],
    }


class TestWorkflow(TestCase):
    """
    Integration test suite for the generate, inject and strip workflow.

    This uses pyfakefs to simulate a real filesystem.
    """

    def setUp(self) -> None:
        """Set up the fake filesystem with a TypeDoc tree and a README."""
        self.setUpPyfakefs()
        self.fs.create_file(TYPEDOC_JSON, contents=json.dumps(_tree()))
        self.fs.create_file(ROOT / "README.md", contents="# my-lib")
        self.config = DocLocaleConfig(l10n_code="fr")

    def _staging(self) -> dict:
        return json.loads(STAGING.read_text(encoding="utf-8"))

    def _translate_staging(self, translation: str) -> None:
        data = self._staging()
        for entry in data.values():
            if entry["originalText"] == "Do the thing.":
                entry["translation"] = translation
        STAGING.write_text(json.dumps(data), encoding="utf-8")

    def test_generate_writes_staging_snapshot(self) -> None:
        """1. Generate: The staging snapshot and README are written, the tree is not."""
        context = run_mode(self.config, ROOT, mode=RunMode.GENERATE)

        data = self._staging()
        texts = sorted(entry["originalText"] for entry in data.values())
        assert texts == ["Do the thing.", "Lifecycle"]
        for key, entry in data.items():
            assert entry["translationKey"] == key
            assert entry["translation"] == ""
            assert list(entry) == ["humanReadablePath", "kind", "originalText", "translation", "projectPath", "translationKey"]
        assert (STAGING.parent / "README.md").read_text(encoding="utf-8") == "# my-lib"
        assert context.unresolved_paths == []
        assert not OUTPUT_JSON.exists()

    def test_generate_carries_translations_forward(self) -> None:
        """2. Generate: Existing staging and prod translations survive regeneration."""
        run_mode(self.config, ROOT, mode=RunMode.GENERATE)
        self._translate_staging("Faire la chose.")

        context = run_mode(self.config, ROOT, mode=RunMode.GENERATE)

        translations = {entry["originalText"]: entry["translation"] for entry in self._staging().values()}
        assert translations == {"Do the thing.": "Faire la chose.", "Lifecycle": ""}
        assert sum(1 for f in context.fragments.values() if f.is_translated) == 1

    def test_generate_prefers_prod_readme(self) -> None:
        """3. Generate: A prod README is copied into a new staging directory."""
        self.fs.create_file(PROD_DIR / "README.md", contents="# ma-lib")
        run_mode(self.config, ROOT, mode=RunMode.GENERATE)
        assert (STAGING.parent / "README.md").read_text(encoding="utf-8") == "# ma-lib"

    def test_generate_aborts_on_corrupt_snapshot(self) -> None:
        """4. Generate: A corrupt staging snapshot aborts the run and is left as-is."""
        self.fs.create_file(STAGING, contents="{broken")

        with pytest.raises(SnapshotFormatError):
            run_mode(self.config, ROOT, mode=RunMode.GENERATE)

        assert STAGING.read_text(encoding="utf-8") == "{broken"

    def test_generate_aborts_on_extraction_error(self) -> None:
        """5. Generate: An extraction failure writes no snapshot."""
        with patch("doclocale.extraction.walker.extract_groups", side_effect=RuntimeError("boom")), pytest.raises(ExtractionError, match="groups"):
            run_mode(self.config, ROOT, mode=RunMode.GENERATE)

        assert not STAGING.exists()

    def test_inject_writes_translated_tree(self) -> None:
        """6. Inject: Translations are applied and the tree is written to the output path."""
        run_mode(self.config, ROOT, mode=RunMode.GENERATE)
        self._translate_staging("Faire la chose.")

        context = run_mode(self.config, ROOT, mode=RunMode.INJECT)

        assert [r.status for r in context.injection_records] == [InjectionStatus.APPLIED]
        written = json.loads(OUTPUT_JSON.read_text(encoding="utf-8"))
        run = written["children"][0]["children"][0]
        assert [part["text"] for part in run["comment"]["summary"]] == ["Runs the widget.", "Faire la chose."]
        assert run["comment"]["blockTags"] == []
        assert run["sources"] == [{"fileName": "src/widget.ts", "line": 12}]
        # The input tree is never modified.
        assert json.loads(TYPEDOC_JSON.read_text(encoding="utf-8")) == _tree()

    def test_inject_skips_stale_entries(self) -> None:
        """7. Inject: A changed source text is left untouched."""
        run_mode(self.config, ROOT, mode=RunMode.GENERATE)
        self._translate_staging("Faire la chose.")
        TYPEDOC_JSON.write_text(json.dumps(_tree("Do the other thing.")), encoding="utf-8")

        context = run_mode(self.config, ROOT, mode=RunMode.INJECT)

        assert [r.status for r in context.injection_records] == [InjectionStatus.STALE]
        run = json.loads(OUTPUT_JSON.read_text(encoding="utf-8"))["children"][0]["children"][0]
        assert run["comment"]["summary"][1]["text"] == "Do the other thing."

    def test_inject_without_snapshot_does_nothing(self) -> None:
        """8. Inject: A missing snapshot is logged and the tree is not touched."""
        project = ProjectReflection.model_validate(_tree())

        with self.assertLogs("doclocale.processing.injection_processors", level="ERROR") as cm:
            context = run_mode(self.config, ROOT, mode=RunMode.INJECT, project=project)

        assert any("Translation file not found" in log for log in cm.output)
        assert not context.tree_modified
        assert project.children[0].children[0].comment.get_tags("@description")
        assert not OUTPUT_JSON.exists()

    def test_strip_writes_stripped_tree(self) -> None:
        """9. Strip: Tags are stripped and the source text kept."""
        config = DocLocaleConfig(l10n_code="fr", translation_mode="default", output_json="site/api.json")

        run_mode(config, ROOT)

        run = json.loads((ROOT / "site" / "api.json").read_text(encoding="utf-8"))["children"][0]["children"][0]
        assert [part["text"] for part in run["comment"]["summary"]] == ["Runs the widget.", "Do the thing."]
        assert not STAGING.exists()

    def test_unknown_mode_runs_generate(self) -> None:
        """10. Fallback: An unknown configured mode runs 'generate'."""
        context = run_mode(DocLocaleConfig(l10n_code="fr", translation_mode="publish"), ROOT)
        assert context.mode is RunMode.GENERATE
        assert STAGING.exists()

    @patch("doclocale.workflow.SummaryReporter.generate")
    def test_reporter_is_called(self, mock_reporter_generate: MagicMock) -> None:
        """11. Reporting: The summary reporter runs once per mode."""
        run_mode(self.config, ROOT, mode=RunMode.STRIP)
        mock_reporter_generate.assert_called_once()

    def test_missing_tree(self) -> None:
        """12. Failure: A missing TypeDoc JSON file raises FileNotFoundError."""
        TYPEDOC_JSON.unlink()
        with pytest.raises(FileNotFoundError):
            run_mode(self.config, ROOT, mode=RunMode.STRIP)


class TestBuildPipeline(unittest.TestCase):
    """Test suite for the per-mode pipelines."""

    def test_pipelines(self) -> None:
        """1. Composition: Each mode runs its processors in order."""
        names = {mode: [p.__class__.__name__ for p in build_pipeline(mode)] for mode in RunMode}
        assert names[RunMode.GENERATE] == [
            "TreeLoadProcessor",
            "ExtractionProcessor",
            "ReconcileProcessor",
            "SnapshotWriteProcessor",
            "PathValidationProcessor",
        ]
        assert names[RunMode.INJECT] == ["TreeLoadProcessor", "InjectionProcessor", "TreeWriteProcessor"]
        assert names[RunMode.STRIP] == ["TreeLoadProcessor", "StripProcessor", "TreeWriteProcessor"]


class TestVersion(unittest.TestCase):
    """Test suite for the package version lookup."""

    @patch("importlib.metadata.version")
    def test_version_import_success(self, mock_version: MagicMock) -> None:
        """1. Version: Ensures __version__ is loaded from metadata when package is installed."""
        mock_version.return_value = "1.2.3"
        assert _get_version() == "1.2.3"
        mock_version.assert_called_once_with("DocLocale")

    @patch("importlib.metadata.version", side_effect=PackageNotFoundError)
    def test_version_import_fails_gracefully(self, _mock_version: MagicMock) -> None:
        """2. Version: Falls back to a development version when not installed."""
        assert _get_version() == "0.0.0-dev"
