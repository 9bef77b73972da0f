"""
Tests for DuplicateAnalyzer: deterministic keep selection and savings accounting.
"""
import random
from pathlib import Path
from ddupe.core.analyzer import DuplicateAnalyzer, analyze_duplicates
from ddupe.core.hasher import HasherImpl


class TestKeepSelection:
    """The keep file must never depend on traversal or bucket order."""

    def test_three_identical_files(self, tmp_path):
        """a.txt, b.txt, c.txt with content 'x' -> keep a.txt, 2 bytes saved."""
        keep = tmp_path / "a.txt"
        dupe_one = tmp_path / "b.txt"
        dupe_two = tmp_path / "c.txt"
        unique = tmp_path / "unique.txt"
        for path in (keep, dupe_one, dupe_two):
            path.write_bytes(b"x")
        unique.write_bytes(b"zzz")

        analysis = DuplicateAnalyzer.analyze({
            "dup": [dupe_two, keep, dupe_one],
            "unique": [unique],
        })

        assert len(analysis.groups) == 1
        group = analysis.groups[0]
        assert group.keep == keep
        assert group.dupes == [dupe_one, dupe_two]
        assert analysis.total_dupes == 2
        assert analysis.removable_files == [dupe_one, dupe_two]
        assert analysis.total_saving_bytes == 2

    def test_shuffled_buckets_give_identical_results(self, tmp_path):
        paths = []
        for name in ["z.txt", "m.txt", "a/b.txt", "a-b.txt", "b.txt"]:
            p = tmp_path / name
            p.parent.mkdir(exist_ok=True)
            p.write_bytes(b"same")
            paths.append(p)
        others = [tmp_path / "q1", tmp_path / "q2"]
        for p in others:
            p.write_bytes(b"other")

        rng = random.Random(7)
        results = []
        for _ in range(5):
            bucket_a, bucket_b = list(paths), list(others)
            rng.shuffle(bucket_a)
            rng.shuffle(bucket_b)
            items = [("h1", bucket_a), ("h2", bucket_b)]
            rng.shuffle(items)
            analysis = DuplicateAnalyzer.analyze(dict(items))
            results.append([(g.keep, g.dupes) for g in analysis.groups])

        assert all(r == results[0] for r in results)
        assert results[0][0][0] == min(paths)

    def test_groups_emitted_in_keep_order(self, tmp_path):
        for name, content in [("b1", b"1"), ("b2", b"1"), ("a1", b"2"), ("a2", b"2")]:
            (tmp_path / name).write_bytes(content)

        analysis = DuplicateAnalyzer.analyze({
            "one": [tmp_path / "b2", tmp_path / "b1"],
            "two": [tmp_path / "a2", tmp_path / "a1"],
        })

        assert [g.keep.name for g in analysis.groups] == ["a1", "b1"]

    def test_accepts_string_paths(self, tmp_path):
        (tmp_path / "x").write_bytes(b"1")
        (tmp_path / "y").write_bytes(b"1")

        analysis = analyze_duplicates({"h": [str(tmp_path / "y"), str(tmp_path / "x")]})

        assert analysis.groups[0].keep == tmp_path / "x"


class TestEmptyAndUniqueInputs:

    def test_empty_map(self):
        analysis = DuplicateAnalyzer.analyze({})

        assert analysis.groups == []
        assert analysis.removable_files == []
        assert analysis.total_saving_bytes == 0
        assert analysis.is_empty()

    def test_pairwise_distinct_content_gives_no_groups(self, tmp_path):
        paths = []
        for i in range(10):
            p = tmp_path / f"f{i}"
            p.write_bytes(b"content-%d" % i)
            paths.append(p)

        analysis = DuplicateAnalyzer.analyze(HasherImpl().build_hash_map(paths).buckets)

        assert analysis.groups == []
        assert analysis.total_dupes == 0

    def test_zero_length_files_are_duplicates(self, test_files):
        """No minimum-size cutoff: empty files share one digest."""
        paths = [test_files["empty1"], test_files["empty2"]]

        analysis = DuplicateAnalyzer.analyze(HasherImpl().build_hash_map(paths).buckets)

        assert len(analysis.groups) == 1
        assert analysis.groups[0].keep == test_files["empty1"]
        assert analysis.total_saving_bytes == 0


class TestSavingsAccounting:

    def test_removable_count_equals_sum_of_dupes(self, test_files):
        paths = list(test_files.values())

        analysis = DuplicateAnalyzer.analyze(HasherImpl().build_hash_map(paths).buckets)

        assert len(analysis.removable_files) == sum(len(g.dupes) for g in analysis.groups)
        # 3x 'A' (1KB), 2x 'B' (2KB), 2x empty
        assert len(analysis.groups) == 3
        assert analysis.total_dupes == 4
        assert analysis.total_saving_bytes == 2 * 1024 + 2048

    def test_keep_files_are_never_removable(self, test_files):
        analysis = DuplicateAnalyzer.analyze(
            HasherImpl().build_hash_map(list(test_files.values())).buckets
        )

        keeps = {g.keep for g in analysis.groups}
        assert keeps.isdisjoint(analysis.removable_files)

    def test_vanished_dupe_is_removable_but_not_counted(self, tmp_path):
        """A dupe deleted between hashing and analysis must not break the analysis."""
        keep = tmp_path / "a.txt"
        present = tmp_path / "b.txt"
        vanished = tmp_path / "c.txt"
        keep.write_bytes(b"12345")
        present.write_bytes(b"12345")

        analysis = DuplicateAnalyzer.analyze({"h": [keep, present, vanished]})

        assert analysis.removable_files == [present, vanished]
        assert analysis.total_saving_bytes == 5
        assert analysis.size_errors == [vanished]

    def test_reanalysis_of_unchanged_files_is_identical(self, test_files):
        paths = list(test_files.values())
        hasher = HasherImpl()

        first = DuplicateAnalyzer.analyze(hasher.build_hash_map(paths).buckets)
        second = DuplicateAnalyzer.analyze(hasher.build_hash_map(list(reversed(paths))).buckets)

        assert first == second
