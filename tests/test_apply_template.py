"""End-to-end tests for the apply_template entry point."""

import os
import tempfile
import unittest
from unittest.mock import MagicMock, patch

import requests

from wikipedia_data import apply_template as app
from wikipedia_data.config import Settings
from wikipedia_data.models import (
    Disambiguation,
    MalformedResponse,
    NotFound,
    Rendered,
    SourceUnavailable,
)

SEARCH_URL = "https://en.wikipedia.org/w/rest.php/v1/search/title"
SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/summary/Ludwig%20Wittgenstein"
EXTRACT_URL = "https://en.wikipedia.org/w/api.php"

SEARCH_PAYLOAD = {
    "pages": [
        {
            "id": 17741,
            "key": "Ludwig_Wittgenstein",
            "title": "Ludwig Wittgenstein",
            "description": "Austrian philosopher (1889–1951)",
            "thumbnail": {"url": "//upload.wikimedia.org/thumb.jpg"},
        }
    ]
}
SUMMARY_PAYLOAD = {
    "type": "standard",
    "title": "Ludwig Wittgenstein",
    "description": "Austrian philosopher (1889–1951)",
    "extract": "Ludwig Josef Johann Wittgenstein was an Austrian philosopher\nwho worked in logic.",
    "content_urls": {"desktop": {"page": "https://en.wikipedia.org/wiki/Ludwig_Wittgenstein"}},
    "thumbnail": {"source": "https://upload.wikimedia.org/LW.jpg"},
}
EXTRACT_PAYLOAD = {
    "query": {
        "pages": {
            "17741": {
                "extract": "Ludwig Wittgenstein was a philosopher.\nHe taught at Cambridge.\n\n\n== Biography ==\nBorn 1889."
            }
        }
    }
}


def route(payloads):
    """Builds a requests.get side effect serving payloads by URL."""

    def fake_get(url, **_kwargs):
        payload = payloads[url]
        if isinstance(payload, Exception):
            raise payload
        resp = MagicMock()
        resp.status_code = 200
        resp.json.return_value = payload
        return resp

    return fake_get


class TestApplyTemplate(unittest.TestCase):
    """Test cases for resolving and rendering in one call."""

    def setUp(self):
        self.payloads = {
            SEARCH_URL: SEARCH_PAYLOAD,
            SUMMARY_URL: SUMMARY_PAYLOAD,
            EXTRACT_URL: EXTRACT_PAYLOAD,
        }

    @patch("requests.get")
    def test_resolved_renders_template_one(self, mock_get):
        mock_get.side_effect = route(self.payloads)

        outcome = app.apply_template("Ludwig Wittgenstein", 1, Settings())

        self.assertIsInstance(outcome, Rendered)
        self.assertIn("Ludwig Wittgenstein", outcome.text)
        self.assertIn("https://en.wikipedia.org/wiki/Ludwig_Wittgenstein", outcome.text)
        self.assertIn(
            "Ludwig Josef Johann Wittgenstein was an Austrian philosopher who worked in logic.",
            outcome.text,
        )
        self.assertIn("![img \\|150](https://upload.wikimedia.org/LW.jpg)", outcome.text)
        self.assertEqual(mock_get.call_count, 3)

    @patch("requests.get")
    def test_resolved_renders_intro_text(self, mock_get):
        mock_get.side_effect = route(self.payloads)

        outcome = app.apply_template("ludwig wittgenstein", 2, Settings())

        self.assertEqual(
            outcome.text,
            "> [!summary]- Wikipedia Synopsis\n"
            "> **Ludwig Wittgenstein** was a philosopher.\n>\n"
            "> He taught at Cambridge.\n",
        )

    @patch("requests.get")
    def test_not_found(self, mock_get):
        self.payloads[SEARCH_URL] = {"pages": []}
        mock_get.side_effect = route(self.payloads)

        outcome = app.apply_template("Qwzxv", 1, Settings())

        self.assertEqual(outcome, NotFound("Qwzxv"))
        self.assertEqual(mock_get.call_count, 1)

    @patch("wikipedia_data.apply_template.TemplateRenderer")
    @patch("requests.get")
    def test_disambiguation_skips_rendering(self, mock_get, mock_renderer):
        self.payloads[SUMMARY_URL] = dict(SUMMARY_PAYLOAD, type="disambiguation")
        mock_get.side_effect = route(self.payloads)

        outcome = app.apply_template("Ludwig Wittgenstein", 1, Settings())

        self.assertEqual(
            outcome,
            Disambiguation(
                "Ludwig Wittgenstein", "https://en.wikipedia.org/wiki/Ludwig_Wittgenstein"
            ),
        )
        mock_renderer.assert_not_called()

    @patch("requests.get")
    def test_network_failure(self, mock_get):
        self.payloads[EXTRACT_URL] = requests.ConnectionError("connection refused")
        mock_get.side_effect = route(self.payloads)

        outcome = app.apply_template("Ludwig Wittgenstein", 1, Settings())

        self.assertIsInstance(outcome, SourceUnavailable)
        self.assertEqual(outcome.source, "MediaWiki Action API")

    @patch("requests.get")
    def test_malformed_summary(self, mock_get):
        self.payloads[SUMMARY_URL] = {"type": "standard", "title": "Ludwig Wittgenstein"}
        mock_get.side_effect = route(self.payloads)

        outcome = app.apply_template("Ludwig Wittgenstein", 1, Settings())

        self.assertIsInstance(outcome, MalformedResponse)
        self.assertEqual(outcome.source, "Wikimedia API")

    @patch("requests.get")
    def test_bad_template_number_makes_no_requests(self, mock_get):
        with self.assertRaises(ValueError):
            app.apply_template("Ludwig Wittgenstein", 9, Settings())
        mock_get.assert_not_called()

    @patch("requests.get")
    def test_apply_template_for_note_appends(self, mock_get):
        mock_get.side_effect = route(self.payloads)
        with tempfile.TemporaryDirectory() as tmp:
            note = os.path.join(tmp, "Ludwig Wittgenstein.md")
            with open(note, "w", encoding="utf-8") as f:
                f.write("# Notes\n")

            outcome = app.apply_template_for_note(note, 1, Settings())

            with open(note, "r", encoding="utf-8") as f:
                content = f.read()
        self.assertIsInstance(outcome, Rendered)
        self.assertTrue(content.startswith("# Notes\n| ![img"))
        self.assertTrue(content.endswith(outcome.text))

    def test_note_search_term(self):
        self.assertEqual(app.note_search_term("/vault/Ludwig Wittgenstein.md"), "Ludwig Wittgenstein")


class TestDescribeOutcome(unittest.TestCase):
    def test_messages(self):
        self.assertEqual(app.describe_outcome(NotFound("X")), "X not found on Wikipedia.")
        self.assertIn(
            "https://en.wikipedia.org/wiki/X",
            app.describe_outcome(Disambiguation("X", "https://en.wikipedia.org/wiki/X")),
        )
        self.assertEqual(
            app.describe_outcome(SourceUnavailable("X", "Wikimedia API", "timeout")),
            "Failed to reach Wikimedia API for article data. "
            "Check your search term, internet connection, or language prefix.",
        )
        self.assertIn("content_urls", app.describe_outcome(MalformedResponse("X", "Wikimedia API", "content_urls")))
        self.assertEqual(app.describe_outcome(Rendered("X", "text")), "text")


class TestMain(unittest.TestCase):
    @patch("wikipedia_data.apply_template.load_settings", return_value=Settings())
    @patch("wikipedia_data.apply_template.apply_template")
    def test_main_prints_rendered_text(self, mock_apply, _mock_settings):
        mock_apply.return_value = Rendered("Kant", "rendered")
        with patch("builtins.print") as mock_print:
            self.assertEqual(app.main(["Kant", "--template", "2"]), 0)
        mock_print.assert_called_once_with("rendered")
        args, _ = mock_apply.call_args
        self.assertEqual(args[:2], ("Kant", 2))

    @patch("wikipedia_data.apply_template.load_settings", return_value=Settings())
    @patch("wikipedia_data.apply_template.apply_template")
    def test_main_reports_failure(self, mock_apply, _mock_settings):
        mock_apply.return_value = NotFound("Kant")
        with patch("builtins.print") as mock_print:
            self.assertEqual(app.main(["Kant"]), 1)
        self.assertEqual(mock_print.call_args[0][0], "Kant not found on Wikipedia.")

    @patch("wikipedia_data.apply_template.load_settings", return_value=Settings())
    def test_main_lists_templates(self, _mock_settings):
        with patch("builtins.print") as mock_print:
            self.assertEqual(app.main(["--list-templates"]), 0)
        self.assertEqual(mock_print.call_count, 3)


if __name__ == "__main__":
    unittest.main()
