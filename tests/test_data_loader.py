import numpy as np

from search_variants.data_loader import (
    generate_letters,
    generate_mountain,
    generate_rotated,
    generate_sorted,
    load_sequence_csv,
    rotate,
)


def test_load_sequence_csv(tmp_path):
    path = tmp_path / "values.csv"
    path.write_text("value,label\n5,a\n1,b\n\n9,c\n", encoding="utf-8")
    assert load_sequence_csv(str(path)) == [5, 1, 9]


def test_load_sequence_csv_without_header(tmp_path):
    path = tmp_path / "values.csv"
    path.write_text("a,4\nb,8\n", encoding="utf-8")
    assert load_sequence_csv(str(path), column=1, has_header=False) == [4, 8]


def test_load_sequence_csv_errors(tmp_path, capsys):
    assert load_sequence_csv(str(tmp_path / "missing.csv")) == []
    assert "Error: Data file not found" in capsys.readouterr().out

    path = tmp_path / "bad.csv"
    path.write_text("value\nnot-a-number\n", encoding="utf-8")
    assert load_sequence_csv(str(path)) == []
    assert "Error processing file" in capsys.readouterr().out


def test_rotate():
    assert rotate([0, 1, 2, 3], 1) == [3, 0, 1, 2]
    assert rotate([0, 1, 2, 3], 0) == [0, 1, 2, 3]
    assert rotate([0, 1, 2, 3], 4) == [0, 1, 2, 3]
    assert rotate([0, 1, 2, 3], -1) == [1, 2, 3, 0]
    assert rotate([], 3) == []


def test_generators_are_seeded():
    assert generate_sorted(50, np.random.default_rng(1)) == generate_sorted(50, np.random.default_rng(1))


def test_generate_sorted():
    rng = np.random.default_rng(0)
    unique = generate_sorted(100, rng)
    assert unique == sorted(unique)
    assert len(set(unique)) == 100
    dups = generate_sorted(100, rng, duplicates=True)
    assert dups == sorted(dups)
    assert len(set(dups)) < 100
    assert generate_sorted(0, rng) == []


def test_generate_rotated():
    rng = np.random.default_rng(2)
    seq, k = generate_rotated(30, rng)
    assert 0 <= k < 30
    assert rotate(seq, -k) == sorted(seq)
    assert generate_rotated(0, rng) == ([], 0)


def test_generate_mountain_is_bitonic():
    rng = np.random.default_rng(4)
    for size in range(1, 30):
        seq = generate_mountain(size, rng)
        assert len(seq) == size
        peak = seq.index(max(seq))
        assert all(seq[i] < seq[i + 1] for i in range(peak))
        assert all(seq[i] > seq[i + 1] for i in range(peak, size - 1))


def test_generate_letters():
    letters = generate_letters(40, np.random.default_rng(6))
    assert letters == sorted(letters)
    assert all(isinstance(c, str) and len(c) == 1 for c in letters)
