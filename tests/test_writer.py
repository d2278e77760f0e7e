"""End-to-end tests for localizer.services.writer.generate_pages."""

import json
import shutil

import pytest
from bs4 import BeautifulSoup

from localizer.errors import ConfigurationError
from localizer.models.config import SiteConfig
from localizer.services.writer import generate_pages

_INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>BentoPDF</title>
  <meta name="description" content="Free PDF tools.">
  <meta property="og:title" content="BentoPDF">
  <link rel="alternate" hreflang="en" href="https://old.example.com/">
</head>
<body>
  <a href="/merge-pdf.html">Merge</a>
  <a href="/fr/merge-pdf.html">Merge (fr)</a>
  <a href="https://github.com/example">GitHub</a>
  <a href="#tools">Tools</a>
  <img src="/assets/logo.png">
  <a href="/assets/guide.pdf">Guide</a>
</body>
</html>
"""

_MERGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head><title>Merge PDF - BentoPDF</title><meta name="description" content="Combine PDFs."></head>
<body><a href="index.html">Home</a></body>
</html>
"""

_NOT_FOUND_HTML = """<!DOCTYPE html>
<html lang="en"><head><title>Not found</title></head><body><a href="/">Back</a></body></html>
"""


def _write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def site(tmp_path):
    dist = tmp_path / "dist"
    dist.mkdir()
    (dist / "index.html").write_text(_INDEX_HTML, encoding="utf-8")
    (dist / "merge-pdf.html").write_text(_MERGE_HTML, encoding="utf-8")
    (dist / "404.html").write_text(_NOT_FOUND_HTML, encoding="utf-8")

    locales = tmp_path / "locales"
    (locales / "en").mkdir(parents=True)
    _write_json(locales / "fr" / "common.json", {"home": {"pageTitle": "BentoPDF - Outils PDF"}})
    _write_json(
        locales / "fr" / "tools.json",
        {
            "mergePdf": {"name": "Fusionner PDF", "subtitle": "Combinez vos PDF."},
            "notFound": {"pageTitle": "Page introuvable"},
        },
    )
    (locales / "de").mkdir()

    config = SiteConfig(site_url="https://example.com", dist_dir=dist, locales_dir=locales)
    return config


def _soup(path):
    return BeautifulSoup(path.read_text(encoding="utf-8"), "lxml")


class TestGeneratePages:
    def test_writes_one_file_per_page_and_locale(self, site):
        summary = generate_pages(site)
        assert summary.pages == 3
        assert summary.locales == ["de", "en", "fr"]
        assert summary.localized_files == 6
        assert summary.refreshed_files == 3
        for locale in ("de", "fr"):
            for name in ("index.html", "merge-pdf.html", "404.html"):
                assert (site.dist_dir / locale / name).is_file()
        assert not (site.dist_dir / "en").exists()

    def test_localized_document(self, site):
        generate_pages(site)
        soup = _soup(site.dist_dir / "fr" / "merge-pdf.html")

        assert soup.html["lang"] == "fr"
        assert soup.title.string == "Fusionner PDF - BentoPDF"
        assert soup.find("meta", attrs={"name": "description"})["content"] == "Combinez vos PDF."
        assert soup.find("link", rel="canonical")["href"] == "https://example.com/fr/merge-pdf"
        assert soup.find("a")["href"] == "fr/index.html"

    def test_index_links_and_alternates(self, site):
        generate_pages(site)
        soup = _soup(site.dist_dir / "de" / "index.html")

        hrefs = [a["href"] for a in soup.find_all("a")]
        assert hrefs == [
            "/de/merge-pdf.html",
            "/fr/merge-pdf.html",
            "https://github.com/example",
            "#tools",
            "/assets/guide.pdf",
        ]
        alternates = soup.find_all("link", hreflang=True)
        assert len(alternates) == 4
        assert len({link["hreflang"] for link in alternates}) == 4
        assert "old.example.com" not in str(soup)
        assert soup.find("link", rel="canonical")["href"] == "https://example.com/de"
        # No bundle entry for "home" in de: metadata stays as built
        assert soup.title.string == "BentoPDF"

    def test_404_uses_not_found_key(self, site):
        generate_pages(site)
        soup = _soup(site.dist_dir / "fr" / "404.html")
        assert soup.title.string == "Page introuvable"
        assert soup.find("a")["href"] == "/fr/"

    def test_default_file_only_refreshes_alternates(self, site):
        generate_pages(site)
        soup = _soup(site.dist_dir / "index.html")

        assert soup.html["lang"] == "en"
        assert soup.title.string == "BentoPDF"
        assert soup.find("a")["href"] == "/merge-pdf.html"
        assert soup.find("link", rel="canonical") is None
        hreflangs = {link["hreflang"]: link["href"] for link in soup.find_all("link", hreflang=True)}
        assert hreflangs == {
            "de": "https://example.com/de",
            "en": "https://example.com",
            "fr": "https://example.com/fr",
            "x-default": "https://example.com",
        }

    def test_default_file_keeps_authored_canonical(self, site):
        html = _MERGE_HTML.replace(
            "</head>", '<link rel="canonical" href="https://cdn.example.com/custom"></head>'
        )
        (site.dist_dir / "merge-pdf.html").write_text(html, encoding="utf-8")
        generate_pages(site)

        canonicals = _soup(site.dist_dir / "merge-pdf.html").find_all("link", rel="canonical")
        assert [link["href"] for link in canonicals] == ["https://cdn.example.com/custom"]
        localized = _soup(site.dist_dir / "fr" / "merge-pdf.html").find_all("link", rel="canonical")
        assert [link["href"] for link in localized] == ["https://example.com/fr/merge-pdf"]

    def test_common_bundle_does_not_set_titles(self, site):
        generate_pages(site)
        assert _soup(site.dist_dir / "fr" / "index.html").title.string == "BentoPDF"

    def test_output_is_deterministic(self, site, tmp_path):
        pristine = tmp_path / "pristine"
        shutil.copytree(site.dist_dir, pristine)

        generate_pages(site)
        first = {p.relative_to(site.dist_dir): p.read_bytes() for p in site.dist_dir.rglob("*.html")}

        shutil.rmtree(site.dist_dir)
        shutil.copytree(pristine, site.dist_dir)
        generate_pages(site)
        second = {p.relative_to(site.dist_dir): p.read_bytes() for p in site.dist_dir.rglob("*.html")}

        assert first == second

    def test_rerun_in_place_does_not_accumulate_links(self, site):
        generate_pages(site)
        generate_pages(site)
        for locale in ("de", "fr"):
            for path in (site.dist_dir / locale).glob("*.html"):
                soup = _soup(path)
                assert len(soup.find_all("link", hreflang=True)) == 4
                assert len(soup.find_all("link", rel="canonical")) == 1
        for path in site.dist_dir.glob("*.html"):
            soup = _soup(path)
            assert len(soup.find_all("link", hreflang=True)) == 4
            assert soup.find("link", rel="canonical") is None

    def test_rerun_in_place_is_byte_identical(self, site):
        generate_pages(site)
        first = {p.name: p.read_bytes() for p in (site.dist_dir / "fr").glob("*.html")}
        generate_pages(site)
        second = {p.name: p.read_bytes() for p in (site.dist_dir / "fr").glob("*.html")}
        assert first == second

    def test_only_locales_restricts_output(self, site):
        summary = generate_pages(site, only_locales=["fr"])
        assert summary.localized_files == 3
        assert not (site.dist_dir / "de").exists()
        soup = _soup(site.dist_dir / "fr" / "index.html")
        assert {link["hreflang"] for link in soup.find_all("link", hreflang=True)} == {
            "de",
            "en",
            "fr",
            "x-default",
        }

    def test_unknown_locale_rejected(self, site):
        with pytest.raises(ConfigurationError):
            generate_pages(site, only_locales=["xx"])

    def test_missing_dist_dir(self, site):
        shutil.rmtree(site.dist_dir)
        with pytest.raises(ConfigurationError):
            generate_pages(site)

    def test_base_path(self, site):
        config = site.model_copy(update={"base_path": "/tools"})
        generate_pages(config)
        soup = _soup(site.dist_dir / "fr" / "index.html")
        assert soup.find("a")["href"] == "/tools/fr/merge-pdf.html"
        assert soup.find("link", rel="canonical")["href"] == "https://example.com/tools/fr"
