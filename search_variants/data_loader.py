import csv
import string
import numpy as np


def load_sequence_csv(file_path: str, column: int = 0, has_header: bool = True) -> list[int]:
    """
    Loads one integer column from a CSV file.
    Returns the values in file order, or an empty list if the file is missing or malformed.
    """
    values = []
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            reader = csv.reader(f)
            if has_header:
                next(reader, None)
            for row in reader:
                if not row:
                    continue
                values.append(int(row[column]))
    except FileNotFoundError:
        print(f"Error: Data file not found at {file_path}")
        return []
    except (ValueError, IndexError) as e:
        print(f"Error processing file {file_path}: {e}")
        return []

    print(f"Loaded {len(values)} values from {file_path}.")
    return values


def generate_sorted(size: int, rng: np.random.Generator, duplicates: bool = False) -> list[int]:
    """
    Generates an ascending list of integers.
    Without duplicates every value is unique; with duplicates values are drawn
    from a range a quarter of the size so most of them repeat.
    """
    if size <= 0:
        return []
    if duplicates:
        values = rng.integers(0, max(1, size // 4), size=size)
    else:
        values = rng.choice(size * 10, size=size, replace=False)
    return sorted(int(v) for v in values)


def rotate(seq: list, k: int) -> list:
    """Rotates seq right by k places: rotate([0, 1, 2, 3], 1) == [3, 0, 1, 2]."""
    if not seq:
        return list(seq)
    k %= len(seq)
    if k == 0:
        return list(seq)
    return list(seq[-k:]) + list(seq[:-k])


def generate_rotated(size: int, rng: np.random.Generator, duplicates: bool = False) -> tuple[list[int], int]:
    """
    Generates an ascending list rotated right by a random k in [0, size).
    Returns the rotated list and k.
    """
    values = generate_sorted(size, rng, duplicates=duplicates)
    if not values:
        return [], 0
    k = int(rng.integers(0, len(values)))
    return rotate(values, k), k


def generate_mountain(size: int, rng: np.random.Generator) -> list[int]:
    """
    Generates a strictly increasing then strictly decreasing list with a random peak position.
    The largest value is placed at the peak, the rest are split randomly between the two sides.
    """
    if size <= 0:
        return []
    values = rng.choice(size * 10, size=size, replace=False)
    values = sorted(int(v) for v in values)
    peak_value = values.pop()

    peak = int(rng.integers(0, size))
    order = rng.permutation(len(values))
    left = sorted(values[i] for i in order[:peak])
    right = sorted((values[i] for i in order[peak:]), reverse=True)
    return left + [peak_value] + right


def generate_letters(size: int, rng: np.random.Generator) -> list[str]:
    """Generates a sorted list of lowercase letters, duplicates allowed."""
    if size <= 0:
        return []
    alphabet = list(string.ascii_lowercase)
    picks = rng.choice(alphabet, size=size)
    return sorted(str(c) for c in picks)
