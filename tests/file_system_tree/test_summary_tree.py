"""Unit tests for the incrementally built summary tree."""

import os

import pytest

from dir2summary.file_system_tree.summary_tree import SummaryTree


class TestSummaryTree:
    def test_empty_tree_renders_root_only(self):
        tree = SummaryTree("project")
        assert tree.render() == "project"
        assert tree.directory_count == 0
        assert tree.file_count == 0

    def test_root_label_keeps_given_form(self):
        assert SummaryTree("./project").render() == "./project"
        assert SummaryTree(".").render() == "."
        assert SummaryTree("project", label="My Project").render() == "My Project"

    def test_nested_file_creates_each_directory_once(self):
        tree = SummaryTree("project")
        tree.add_file("project/src/lib/mod.rs")
        tree.add_directory("project/src")
        tree.add_directory("project/src/lib")
        tree.add_file("project/src/lib/util.rs")

        assert tree.render() == "\n".join(
            [
                "project",
                "└── src",
                "    └── lib",
                "        ├── mod.rs",
                "        └── util.rs",
            ]
        )
        assert tree.directory_count == 2
        assert tree.file_count == 2

    def test_add_directory_is_idempotent(self):
        tree = SummaryTree("project")
        first = tree.add_directory("project/docs")
        second = tree.add_directory("project/docs")
        assert first is second
        assert len(tree.root.children) == 1

    def test_children_keep_insertion_order(self):
        tree = SummaryTree("repo")
        tree.add_file("repo/zeta.txt")
        tree.add_directory("repo/alpha")
        tree.add_file("repo/beta.txt")

        assert [node.name for node in tree.root.children] == ["zeta.txt", "alpha", "beta.txt"]

    def test_symlinks(self):
        tree = SummaryTree("repo")
        tree.add_symlink("repo/latest", "releases/v2")
        tree.add_symlink("repo/bin/broken", None)

        assert tree.render() == "\n".join(
            [
                "repo",
                "├── latest -> releases/v2",
                "└── bin",
                "    └── broken -> [unreadable link]",
            ]
        )
        assert tree.symlink_count == 2
        assert tree.file_count == 0

    def test_box_drawing_continuation(self):
        tree = SummaryTree("p")
        tree.add_file("p/a/x.txt")
        tree.add_file("p/b.txt")

        lines = list(tree.stream_tree_representation())
        assert lines == ["p", "├── a", "│   └── x.txt", "└── b.txt"]

    def test_equivalent_path_spellings(self, tmp_path):
        root = str(tmp_path / "project")
        tree = SummaryTree(root)
        tree.add_file(os.path.join(root, "src", "main.rs"))
        tree.add_directory(os.path.join(root, "src", ".", ""))
        assert tree.directory_count == 1

    def test_render_is_repeatable(self):
        tree = SummaryTree("project")
        tree.add_file("project/a/b.txt")
        assert tree.render() == tree.render()

    def test_paths_outside_root_rejected(self):
        tree = SummaryTree("project")
        with pytest.raises(ValueError, match="is not inside"):
            tree.add_file("elsewhere/file.txt")
        with pytest.raises(ValueError, match="is not inside"):
            tree.add_directory("project/../elsewhere")

    def test_root_cannot_be_a_leaf(self):
        tree = SummaryTree("project")
        with pytest.raises(ValueError, match="Cannot insert the tree root"):
            tree.add_file("project")

    def test_adding_root_directory_is_noop(self):
        tree = SummaryTree("project")
        assert tree.add_directory("project") is tree.root
        assert tree.directory_count == 0


class TestInsertionPoints:
    def test_begin_add_end(self):
        tree = SummaryTree("repo")
        node = tree.begin_child("repo/docs")
        leaf = tree.add_leaf("guide.md")
        tree.end_child()

        assert leaf.parent is node
        assert tree.add_leaf("README.md").parent is tree.root

    def test_nested_insertion_points(self):
        tree = SummaryTree("repo")
        tree.begin_child("repo/a")
        tree.begin_child("repo/a/b")
        assert tree.add_leaf("inner").parent.name == "b"
        tree.end_child()
        assert tree.add_leaf("outer").parent.name == "a"
        tree.end_child()

    def test_end_without_begin(self):
        tree = SummaryTree("repo")
        with pytest.raises(RuntimeError, match="without a matching begin_child"):
            tree.end_child()

    def test_failed_insert_leaves_no_open_insertion_point(self):
        tree = SummaryTree("repo")
        with pytest.raises(ValueError):
            tree.add_file("other/file.txt")
        with pytest.raises(RuntimeError):
            tree.end_child()
