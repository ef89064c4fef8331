"""
Settings tests
"""

from mdautogen.config import AppSettings


class TestAppSettings:
    """Test environment-driven configuration"""

    def test_defaults(self, monkeypatch):
        """Defaults match the standard markers, UTF-8, toggles off"""
        for name in ("MDAUTOGEN_TRIM_TRAILING_BREAKS", "MDAUTOGEN_INFER_HEADERS", "MDAUTOGEN_ENCODING"):
            monkeypatch.delenv(name, raising=False)
        settings = AppSettings(_env_file=None)
        assert settings.begin_marker == "<!-- BEGIN_MDAUTOGEN:"
        assert settings.end_marker == "<!-- END_MDAUTOGEN"
        assert settings.encoding == "utf-8"
        assert settings.trim_trailing_breaks is False
        assert settings.infer_headers is False

    def test_environment_override(self, monkeypatch):
        """MDAUTOGEN_ variables override defaults, case-insensitively"""
        monkeypatch.setenv("MDAUTOGEN_TRIM_TRAILING_BREAKS", "true")
        monkeypatch.setenv("mdautogen_encoding", "latin-1")
        settings = AppSettings(_env_file=None)
        assert settings.trim_trailing_breaks is True
        assert settings.encoding == "latin-1"

    def test_begin_pattern(self):
        """Begin pattern requires the marker to fill the whole line"""
        pattern = AppSettings(_env_file=None).beginPattern_make()
        match = pattern.match("<!-- BEGIN_MDAUTOGEN: code_table('a','b') -->")
        assert match.group(1) == " code_table('a','b')"
        assert pattern.match("x <!-- BEGIN_MDAUTOGEN: f() -->") is None
        assert pattern.match("<!-- BEGIN_MDAUTOGEN: f() --> x") is None
        assert pattern.match("<!-- BEGIN_MDAUTOGEN: -->") is None
