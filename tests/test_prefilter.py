"""
Tests for CandidateFilter: size and front-chunk narrowing before full hashing.
"""
from ddupe.core.prefilter import CandidateFilter


class TestCandidateFilter:

    def test_unique_sizes_are_dropped(self, tmp_path):
        same_a = tmp_path / "a"
        same_b = tmp_path / "b"
        other = tmp_path / "c"
        same_a.write_bytes(b"1234")
        same_b.write_bytes(b"1234")
        other.write_bytes(b"12345")

        survivors = CandidateFilter().filter([same_a, same_b, other])

        assert sorted(survivors) == [same_a, same_b]

    def test_different_front_chunk_is_dropped(self, tmp_path):
        a = tmp_path / "a"
        b = tmp_path / "b"
        a.write_bytes(b"X" + b"0" * 99)
        b.write_bytes(b"Y" + b"0" * 99)

        assert CandidateFilter(front_chunk_size=16).filter([a, b]) == []

    def test_same_front_different_tail_survives(self, tmp_path):
        """The pre-filter only narrows; full hashing makes the final call."""
        a = tmp_path / "a"
        b = tmp_path / "b"
        a.write_bytes(b"0" * 64 + b"tail-a")
        b.write_bytes(b"0" * 64 + b"tail-b")

        assert sorted(CandidateFilter(front_chunk_size=16).filter([a, b])) == [a, b]

    def test_empty_files_survive(self, test_files):
        survivors = CandidateFilter().filter([test_files["empty1"], test_files["empty2"]])

        assert len(survivors) == 2

    def test_missing_file_recorded_as_error(self, tmp_path):
        present = tmp_path / "present"
        present.write_bytes(b"x")
        missing = tmp_path / "missing"

        candidate_filter = CandidateFilter()
        survivors = candidate_filter.filter([present, missing])

        assert survivors == []
        assert [p for p, _ in candidate_filter.errors] == [missing]
