"""Tests for the typed-path model.

Covers directory/fragment splitting, parent and root traversal, directory
shortcuts, common-prefix completion, and the initial input path.
"""

from __future__ import annotations

import os
import unittest

from lazyopen.path_model import InputPath, InvalidArgumentError, PathResolver
from lazyopen.runtime.config import DefaultInputValue, PickerConfig
from lazyopen.runtime.host import TerminalHost


def _resolver() -> PathResolver:
    return PathResolver(home_directory="/home/alice", project_paths=lambda: ["/proj"])


class InputPathSplitTests(unittest.TestCase):
    def test_directory_plus_fragment_rebuilds_full_text(self) -> None:
        samples = ["", "/", "/a/b/c.txt", "/a/b/", "src/main.py", "~/", "C:\\Users\\bob\\notes.md", "plain"]
        for text in samples:
            path = InputPath(text)
            self.assertEqual(path.directory + path.fragment, text)
            self.assertEqual(path.fragment == "", text == "" or text.endswith(path.sep))

    def test_splits_on_last_separator(self) -> None:
        path = InputPath.parse("/a/b/c.txt")
        self.assertEqual(path.directory, "/a/b/")
        self.assertEqual(path.fragment, "c.txt")
        self.assertEqual(path.sep, "/")
        self.assertEqual(str(path), "/a/b/c.txt")

    def test_backslash_paths_use_backslash_separator(self) -> None:
        path = InputPath("C:\\Users\\bob\\file")
        self.assertEqual(path.sep, "\\")
        self.assertEqual(path.directory, "C:\\Users\\bob\\")
        self.assertEqual(path.fragment, "file")

    def test_empty_input_uses_host_separator(self) -> None:
        path = InputPath("")
        self.assertEqual(path.sep, os.sep)
        self.assertEqual(path.directory, "")
        self.assertEqual(path.fragment, "")

    def test_equality_and_hash_follow_full_text(self) -> None:
        self.assertEqual(InputPath("/a/b"), InputPath("/a/b"))
        self.assertNotEqual(InputPath("/a/b"), InputPath("/a/b/"))
        self.assertEqual(len({InputPath("/x"), InputPath("/x")}), 1)
        self.assertTrue(InputPath("/x").equals(InputPath("/x")))

    def test_as_directory_is_idempotent(self) -> None:
        once = InputPath("/a/b").as_directory()
        self.assertEqual(once.full, "/a/b/")
        self.assertEqual(once.as_directory(), once)

    def test_case_sensitive_fragment_requires_uppercase(self) -> None:
        self.assertTrue(InputPath("/a/Foo").has_case_sensitive_fragment())
        self.assertFalse(InputPath("/a/foo").has_case_sensitive_fragment())
        self.assertFalse(InputPath("/A/").has_case_sensitive_fragment())


class InputPathTraversalTests(unittest.TestCase):
    def test_parent_of_file_is_its_directory(self) -> None:
        self.assertEqual(InputPath("/a/b/c.txt").parent(_resolver()).full, "/a/b/")

    def test_parent_of_directory_strips_last_component(self) -> None:
        resolver = _resolver()
        self.assertEqual(InputPath("/a/b/").parent(resolver).full, "/a/")
        self.assertEqual(InputPath("/a/").parent(resolver).full, "/")

    def test_parent_chain_reaches_root_fixed_point(self) -> None:
        resolver = _resolver()
        path = InputPath("/a/b/c/")
        for _ in range(10):
            path = path.parent(resolver)
        self.assertEqual(path.full, "/")
        self.assertTrue(path.is_root(resolver))
        self.assertEqual(path.parent(resolver), path)

    def test_parent_of_home_shortcut_continues_from_absolute_form(self) -> None:
        self.assertEqual(InputPath("~/").parent(_resolver()).full, "/home/")

    def test_parent_of_relative_directory(self) -> None:
        self.assertEqual(InputPath("src/lib/").parent(_resolver()).full, "src/")

    def test_root_of_nested_path(self) -> None:
        root = InputPath("/a/b/c.txt").root(_resolver())
        self.assertEqual(root.full, "/")
        self.assertEqual(root.root(_resolver()), root)

    def test_relative_path_resolves_against_project(self) -> None:
        resolver = _resolver()
        self.assertEqual(InputPath("src/a.py").absolute(resolver), "/proj/src/a.py")
        self.assertEqual(InputPath("src/a.py").absolute_directory(resolver), "/proj/src")
        self.assertTrue(InputPath("/proj/").is_project_directory(resolver))


class InputPathShortcutTests(unittest.TestCase):
    def test_double_separator_is_root_shortcut(self) -> None:
        self.assertTrue(InputPath("/home/x//").has_shortcut(""))
        self.assertFalse(InputPath("/home/x/").has_shortcut(""))

    def test_project_shortcut_requires_its_own_segment(self) -> None:
        self.assertTrue(InputPath(":/").has_shortcut(":"))
        self.assertTrue(InputPath("/foo/bar/:/").has_shortcut(":"))
        self.assertFalse(InputPath("/home/x:/").has_shortcut(":"))
        self.assertFalse(InputPath("/blah/:").has_shortcut(":"))

    def test_home_shortcut(self) -> None:
        self.assertTrue(InputPath("~/").has_shortcut("~"))
        self.assertTrue(InputPath("/tmp/~/").has_shortcut("~"))
        self.assertFalse(InputPath("/tmp/a~/").has_shortcut("~"))


class InputPathOrderingTests(unittest.TestCase):
    def test_common_prefix_of_two_paths(self) -> None:
        paths = [InputPath("/foo/bar"), InputPath("/foo/baz")]
        self.assertEqual(InputPath.common_prefix(paths).full, "/foo/ba")

    def test_common_prefix_is_order_independent(self) -> None:
        paths = [InputPath("/foo/bark"), InputPath("/foo/bar"), InputPath("/foo/bay")]
        expected = InputPath.common_prefix(paths)
        self.assertEqual(InputPath.common_prefix(list(reversed(paths))), expected)
        self.assertEqual(expected.full, "/foo/ba")

    def test_common_prefix_case_handling(self) -> None:
        paths = [InputPath("/foo/Bar"), InputPath("/foo/bar")]
        self.assertEqual(InputPath.common_prefix(paths).full, "/foo/bar")
        self.assertEqual(InputPath.common_prefix(paths, case_sensitive=True).full, "/foo/")

    def test_common_prefix_needs_two_paths(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            InputPath.common_prefix([InputPath("/only")])
        with self.assertRaises(ValueError):
            InputPath.common_prefix([])

    def test_compare_is_case_insensitive_with_stable_tiebreak(self) -> None:
        self.assertEqual(InputPath.compare(InputPath("a"), InputPath("B")), -1)
        self.assertEqual(InputPath.compare(InputPath("b"), InputPath("A")), 1)
        self.assertEqual(InputPath.compare(InputPath("x"), InputPath("x")), 0)
        self.assertNotEqual(InputPath.compare(InputPath("X"), InputPath("x")), 0)
        ordered = sorted([InputPath("beta"), InputPath("Alpha"), InputPath("alpha")], key=InputPath.sort_key)
        self.assertEqual([path.full for path in ordered], ["Alpha", "alpha", "beta"])


class InitialInputPathTests(unittest.TestCase):
    def test_active_document_directory(self) -> None:
        host = TerminalHost(document_path="/work/src/main.py", projects=["/work"])
        self.assertEqual(InputPath.initial(PickerConfig(), host).full, "/work/src" + os.sep)

    def test_active_document_falls_back_to_project(self) -> None:
        host = TerminalHost(projects=["/work"])
        self.assertEqual(InputPath.initial(PickerConfig(), host).full, "/work" + os.sep)

    def test_project_root_choice(self) -> None:
        host = TerminalHost(document_path="/work/src/main.py", projects=["/work"])
        config = PickerConfig(default_input_value=DefaultInputValue.PROJECT_ROOT)
        self.assertEqual(InputPath.initial(config, host).full, "/work" + os.sep)

    def test_empty_choice_and_no_context(self) -> None:
        host = TerminalHost(document_path="/work/src/main.py", projects=["/work"])
        config = PickerConfig(default_input_value=DefaultInputValue.EMPTY)
        self.assertEqual(InputPath.initial(config, host).full, "")
        self.assertEqual(InputPath.initial(PickerConfig(), TerminalHost()).full, "")


if __name__ == "__main__":
    unittest.main()
