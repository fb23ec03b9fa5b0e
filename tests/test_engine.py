"""
Tests for the WindSort engine
"""

import json
import os

import pytest

from windsort.config import Config, WriteMode
from windsort.engine import FileResult, RunReport, WindSort
from windsort.extractor import ClassExtractor


UNSORTED = '<div class="p-4 flex">\n  <p class="text-lg font-bold mt-2">hi</p>\n</div>\n'
SORTED = '<div class="flex p-4">\n  <p class="mt-2 text-lg font-bold">hi</p>\n</div>\n'


def make_engine(mode=WriteMode.DRY_RUN, **settings):
    config = Config()
    config.settings.write_mode = mode
    for key, value in settings.items():
        setattr(config.settings, key, value)
    return WindSort(config=config)


@pytest.fixture
def project(tmp_path):
    """A small project tree with sortable, sorted and ignored files"""
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "index.html").write_text(UNSORTED, encoding="utf-8")
    (tmp_path / "src" / "done.html").write_text(SORTED, encoding="utf-8")
    (tmp_path / "src" / "plain.html").write_text("<p>nothing</p>\n", encoding="utf-8")
    (tmp_path / "src" / "styles.css").write_text('.a { content: "class=\\"b a\\""; }', encoding="utf-8")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "lib.html").write_text(UNSORTED, encoding="utf-8")
    (tmp_path / ".cache").mkdir()
    (tmp_path / ".cache" / "page.html").write_text(UNSORTED, encoding="utf-8")
    (tmp_path / ".hidden.html").write_text(UNSORTED, encoding="utf-8")
    return tmp_path


class TestCollectFiles:
    """Test cases for file discovery"""

    def test_walks_directory(self, project):
        """Test walking a tree in sorted order"""
        files = make_engine().collect_files(str(project))
        names = [os.path.relpath(f, project) for f in files]

        assert names == [
            os.path.join("src", "done.html"),
            os.path.join("src", "index.html"),
            os.path.join("src", "plain.html"),
        ]

    def test_include_hidden(self, project):
        """Test including hidden entries when asked"""
        files = make_engine(skip_hidden=False).collect_files(str(project))
        names = {os.path.relpath(f, project) for f in files}

        assert ".hidden.html" in names
        assert os.path.join(".cache", "page.html") in names
        assert os.path.join("node_modules", "lib.html") not in names

    def test_single_file_any_extension(self, project):
        """Test that an explicit file is used whatever its extension"""
        path = str(project / "src" / "styles.css")
        assert make_engine().collect_files(path) == [path]

    def test_missing_path(self, tmp_path):
        """Test a path that does not exist"""
        with pytest.raises(FileNotFoundError):
            make_engine().collect_files(str(tmp_path / "missing"))


class TestProcessFile:
    """Test cases for single file processing"""

    def test_dry_run_does_not_write(self, project):
        """Test that dry run leaves the file alone"""
        path = project / "src" / "index.html"
        result = make_engine(WriteMode.DRY_RUN).process_file(str(path))

        assert result.has_classes
        assert result.changed
        assert result.spans == 2
        assert result.sorted_content == SORTED
        assert path.read_text(encoding="utf-8") == UNSORTED

    def test_write_mode_saves(self, project):
        """Test saving sorted content in write mode"""
        path = project / "src" / "index.html"
        result = make_engine(WriteMode.TO_FILE).process_file(str(path))

        assert result.changed
        assert not result.failed
        assert path.read_text(encoding="utf-8") == SORTED

    def test_write_mode_skips_unchanged(self, project):
        """Test that sorted files are not rewritten"""
        path = project / "src" / "done.html"
        before = os.stat(path).st_mtime_ns
        result = make_engine(WriteMode.TO_FILE).process_file(str(path))

        assert result.has_classes
        assert not result.changed
        assert os.stat(path).st_mtime_ns == before

    def test_file_without_classes(self, project):
        """Test a file with no class attributes"""
        result = make_engine().process_file(str(project / "src" / "plain.html"))

        assert not result.has_classes
        assert not result.changed
        assert result.sorted_content == ""

    def test_line_endings_preserved(self, tmp_path):
        """Test that CRLF line endings survive a write"""
        path = tmp_path / "win.html"
        path.write_bytes(b'<a class="p-4 flex">\r\n<b>\r\n</b>\r\n')
        make_engine(WriteMode.TO_FILE).process_file(str(path))

        assert path.read_bytes() == b'<a class="flex p-4">\r\n<b>\r\n</b>\r\n'

    def test_unreadable_file(self, tmp_path):
        """Test that undecodable bytes are recorded as an error"""
        path = tmp_path / "binary.html"
        path.write_bytes(b'\xff\xfe<a class="p-4 flex">')
        result = make_engine().process_file(str(path))

        assert result.failed
        assert "Unable to read file" in result.error_message

    def test_allow_duplicates(self, tmp_path):
        """Test the allow_duplicates setting"""
        path = tmp_path / "dup.html"
        path.write_text('<a class="p-4 flex p-4">', encoding="utf-8")

        assert make_engine().process_file(str(path)).sorted_content == '<a class="flex p-4">'
        result = make_engine(allow_duplicates=True).process_file(str(path))
        assert result.sorted_content == '<a class="flex p-4 p-4">'

    def test_custom_order_from_config(self, tmp_path):
        """Test a configured sort_order"""
        path = tmp_path / "custom.html"
        path.write_text('<a class="card btn flex">', encoding="utf-8")
        config = Config(sort_order=["btn", "card"])
        result = WindSort(config=config).process_file(str(path))

        assert result.sorted_content == '<a class="flex btn card">'

    def test_spans_found_once(self, project):
        """Test that a file is scanned for spans a single time"""
        calls = []

        class CountingExtractor(ClassExtractor):
            def find_spans(self, content):
                calls.append(content)
                return super().find_spans(content)

        engine = make_engine()
        engine.extractor = CountingExtractor()
        result = engine.process_file(str(project / "src" / "index.html"))

        assert result.sorted_content == SORTED
        assert len(calls) == 1


class TestRun:
    """Test cases for whole runs"""

    def test_dry_run_report(self, project):
        """Test the totals of a dry run"""
        report = make_engine(WriteMode.DRY_RUN).run(str(project))

        assert isinstance(report, RunReport)
        assert report.total_files == 3
        assert report.files_with_classes == 2
        assert report.files_changed == 1
        assert report.errors == 0
        assert report.ok
        assert [r.filename for r in report.results if r.changed] == [os.path.join("src", "index.html")]
        assert (project / "src" / "index.html").read_text(encoding="utf-8") == UNSORTED

    def test_write_run(self, project):
        """Test that ignored and hidden files are not written"""
        make_engine(WriteMode.TO_FILE).run(str(project))

        assert (project / "src" / "index.html").read_text(encoding="utf-8") == SORTED
        assert (project / "node_modules" / "lib.html").read_text(encoding="utf-8") == UNSORTED
        assert (project / ".hidden.html").read_text(encoding="utf-8") == UNSORTED

    def test_results_keep_discovery_order(self, tmp_path):
        """Test that parallel processing reports files in walk order"""
        for i in range(20):
            (tmp_path / f"f{i:02d}.html").write_text('<a class="p-4 flex">', encoding="utf-8")

        calls = []
        engine = make_engine(workers=8)
        engine.set_result_callback(calls.append)
        report = engine.run(str(tmp_path))

        expected = [f"f{i:02d}.html" for i in range(20)]
        assert [r.filename for r in report.results] == expected
        assert [r.filename for r in calls] == expected

    def test_error_does_not_stop_batch(self, tmp_path):
        """Test that one bad file does not stop the others"""
        (tmp_path / "a.html").write_bytes(b'\xff<a class="p-4 flex">')
        (tmp_path / "b.html").write_text('<a class="p-4 flex">', encoding="utf-8")
        report = make_engine(WriteMode.TO_FILE, workers=1).run(str(tmp_path))

        assert report.errors == 1
        assert not report.ok
        assert report.files_changed == 1
        assert (tmp_path / "b.html").read_text(encoding="utf-8") == '<a class="flex p-4">'

    def test_single_file_display_name(self, project):
        """Test the display name of a single file run"""
        report = make_engine().run(str(project / "src" / "index.html"))
        assert [r.filename for r in report.results] == ["index.html"]

    def test_progress_bar(self, project):
        """Test a run with the progress bar on"""
        report = make_engine().run(str(project), show_progress=True)
        assert report.total_files == 3

    def test_report_save(self, project, tmp_path):
        """Test saving a report as JSON"""
        engine = make_engine()
        report = engine.run(str(project))
        out = tmp_path / "report.json"
        report.save(str(out))

        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["write_mode"] == "dry-run"
        assert data["files_changed"] == 1
        assert len(data["results"]) == 3
        assert "sorted_content" not in data["results"][0]

    def test_get_stats(self, project):
        """Test statistics for the last run"""
        engine = make_engine()
        engine.run(str(project))
        stats = engine.get_stats()

        assert stats["total_files"] == 3
        assert stats["with_classes"] == 2
        assert stats["changed"] == 1
        assert stats["spans"] == 4


class TestFileResult:
    """Test cases for FileResult"""

    def test_str(self):
        """Test the short text form"""
        assert str(FileResult("a/b.html", "b.html", changed=True)) == "b.html (changed)"
        assert str(FileResult("a/b.html", "b.html", error_message="x")) == "b.html (error)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
