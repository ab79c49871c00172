"""Tests for convention-based file lookup."""

from symbol_autoloader.convention import ConventionResolver


class TestClassPath:
    def test_separators_and_underscores_become_directories(self, fs):
        resolver = ConventionResolver(fs)
        assert resolver.class_path("Foo.Bar_Baz") == "Foo/Bar/Baz"

    def test_custom_separator(self, fs):
        resolver = ConventionResolver(fs, separator="\\")
        assert resolver.class_path("Foo\\Bar_Baz") == "Foo/Bar/Baz"

    def test_plain_name_unchanged(self, fs):
        assert ConventionResolver(fs).class_path("User") == "User"


class TestLocate:
    def test_lowercase_probe_precedes_case_preserving(self, fs):
        resolver = ConventionResolver(fs)
        probes: list[str] = []

        assert resolver.locate("Foo.Bar_Baz", ["/app/"], probes) is None
        assert probes == ["/app/foo/bar/baz.py", "/app/Foo/Bar/Baz.py"]

    def test_identical_candidates_probed_once(self, fs):
        resolver = ConventionResolver(fs)
        probes: list[str] = []

        resolver.locate("user", ["/app/"], probes)

        assert probes == ["/app/user.py"]

    def test_case_preserving_hit(self, fs):
        fs.files.add("/app/Foo/Bar.py")
        resolver = ConventionResolver(fs)

        assert resolver.locate("Foo.Bar", ["/app/"]) == "/app/Foo/Bar.py"

    def test_roots_searched_in_order_and_short_circuit(self, fs):
        fs.files.update({"/second/user.py", "/third/user.py"})
        resolver = ConventionResolver(fs)

        assert resolver.locate("User", ["/first/", "/second/", "/third/"]) == "/second/user.py"
        assert "/third/user.py" not in fs.probed

    def test_root_without_trailing_separator(self, fs):
        fs.files.add("/lib/user.py")
        assert ConventionResolver(fs).locate("User", ["/lib"]) == "/lib/user.py"

    def test_custom_extension(self, fs):
        fs.files.add("/app/user.src")
        assert ConventionResolver(fs, extension=".src").locate("User", ["/app/"]) == "/app/user.src"

    def test_locate_never_loads(self, fs):
        fs.files.add("/app/user.py")
        ConventionResolver(fs).locate("User", ["/app/"])
        assert fs.loaded == []


class TestResolve:
    def test_loads_first_existing_file(self, fs):
        fs.files.add("/app/foo/bar.py")
        resolver = ConventionResolver(fs)

        assert resolver.resolve("Foo.Bar", ["/app/"]) == "/app/foo/bar.py"
        assert fs.loaded == ["/app/foo/bar.py"]

    def test_not_found_is_silent(self, fs):
        resolver = ConventionResolver(fs)

        assert resolver.resolve("Missing", ["/app/", "/lib/"]) is None
        assert fs.loaded == []

    def test_no_roots(self, fs):
        assert ConventionResolver(fs).resolve("User", []) is None
        assert fs.probed == []

    def test_empty_root_probes_relative_paths(self, fs):
        probes: list[str] = []

        ConventionResolver(fs).locate("Bar_Baz", [""], probes)

        assert probes == ["bar/baz.py", "Bar/Baz.py"]
