import argparse
import time
import numpy as np
from tabulate import tabulate
from tqdm import tqdm

from search_variants.data_loader import (
    generate_letters,
    generate_mountain,
    generate_rotated,
    generate_sorted,
    load_sequence_csv,
    rotate,
)
from search_variants.mountain import peak_index, search_mountain
from search_variants.rotated import count_rotations, search_rotated
from search_variants.searches import (
    next_greatest_letter,
    order_agnostic_search,
    search_full_scan,
    search_range,
)
from search_variants.sources import CountingSource, UnboundedArraySource
from search_variants.unbounded import search_unbounded


def brute_force_range(seq, target) -> list[int]:
    hits = [i for i in range(len(seq)) if seq[i] == target]
    return [hits[0], hits[-1]] if hits else [-1, -1]


def brute_force_next_letter(letters, target):
    for c in letters:
        if c > target:
            return c
    return letters[0]


def build_workloads(base: list[int], rng: np.random.Generator, size: int) -> dict:
    """
    Builds one workload per search family.
    Each workload holds the sequence, the source handed to the search (so reads can be counted),
    how to draw a query, the search itself and the check against a brute-force answer.
    """
    ascending = sorted(base)
    descending = ascending[::-1]
    duplicated = generate_sorted(size, rng, duplicates=True)
    rotated, _ = generate_rotated(size, rng)
    rotated_dups, _ = generate_rotated(size, rng, duplicates=True)
    mountain = generate_mountain(size, rng)
    letters = generate_letters(size, rng)

    def pick(seq):
        return lambda: seq[int(rng.integers(0, len(seq)))]

    def found_value(seq):
        return lambda q, result: result != -1 and seq[result] == q

    return {
        "Full Scan": {
            'data': ascending,
            'query': pick(ascending),
            'search': search_full_scan,
            'check': found_value(ascending),
        },
        "Order-Agnostic (asc)": {
            'data': ascending,
            'query': pick(ascending),
            'search': order_agnostic_search,
            'check': found_value(ascending),
        },
        "Order-Agnostic (desc)": {
            'data': descending,
            'query': pick(descending),
            'search': order_agnostic_search,
            'check': found_value(descending),
        },
        "First/Last Range": {
            'data': duplicated,
            'query': pick(duplicated),
            'search': search_range,
            'check': lambda q, result: result == brute_force_range(duplicated, q),
        },
        "Rotated Search": {
            'data': rotated,
            'query': pick(rotated),
            'search': search_rotated,
            'check': found_value(rotated),
        },
        "Rotated Search (dups)": {
            'data': rotated_dups,
            'query': pick(rotated_dups),
            'search': lambda seq, q: search_rotated(seq, q, allow_duplicates=True),
            'check': found_value(rotated_dups),
        },
        "Rotation Count (dups)": {
            'data': rotated_dups,
            'query': lambda: None,
            'search': lambda seq, q: count_rotations(seq, allow_duplicates=True),
            'check': lambda q, result: rotate(rotated_dups, -result) == sorted(rotated_dups),
        },
        "Mountain Peak": {
            'data': mountain,
            'query': lambda: None,
            'search': lambda seq, q: peak_index(seq),
            'check': lambda q, result: mountain[result] == max(mountain),
        },
        "Mountain Search": {
            'data': mountain,
            'query': pick(mountain),
            'search': search_mountain,
            'check': found_value(mountain),
        },
        "Unbounded Doubling": {
            'data': UnboundedArraySource(ascending),
            'query': pick(ascending),
            'search': search_unbounded,
            'check': found_value(ascending),
        },
        "Next Greatest Letter": {
            'data': letters,
            'query': pick(letters),
            'search': next_greatest_letter,
            'check': lambda q, result: result == brute_force_next_letter(letters, q),
        },
    }


def run_benchmark(size: int, num_runs: int = 10, seed: int | None = None,
                  csv_path: str | None = None, show_progress: bool = False) -> dict:
    """
    Builds the workloads, runs every search family on random queries and prints
    the averaged results. Returns the raw per-family measurements.
    """
    print("--- Binary Search Variants Benchmark ---")
    rng = np.random.default_rng(seed)

    # 1. Load or generate the base sequence
    if csv_path:
        print(f"\n1. Loading sequence from {csv_path}...")
        base = load_sequence_csv(csv_path)
        if not base:
            print("Could not load a sequence. Exiting.")
            return {}
        size = len(base)
    else:
        print(f"\n1. Generating {size} sorted values...")
        base = generate_sorted(size, rng)
        if not base:
            print("Nothing to search, size must be positive. Exiting.")
            return {}

    # 2. Build one workload per search family
    print("2. Building workloads...")
    workloads = build_workloads(base, rng, size)

    all_results = {name: {'times': [], 'probes': [], 'successes': []} for name in workloads}

    print(f"\n--- Running Benchmarks over {num_runs} random queries ---")
    runs = range(num_runs)
    if show_progress:
        runs = tqdm(runs, desc="Benchmarking", unit="run")

    for _ in runs:
        for name, workload in workloads.items():
            query = workload['query']()
            source = CountingSource(workload['data'])

            start_time = time.perf_counter()
            result = workload['search'](source, query)
            end_time = time.perf_counter()

            success = bool(workload['check'](query, result))
            if not success:
                print(f"Warning: {name} returned {result!r} for query {query!r}.")
            all_results[name]['times'].append((end_time - start_time) * 1e6)
            all_results[name]['probes'].append(source.probes)
            all_results[name]['successes'].append(success)

    # 3. Average and print results
    print("\n\n--- Final Averaged Benchmark Results ---")

    headers = ["Search Method", "Avg Time (µs)", "Avg Probes", "Success Rate"]
    table_data = []
    for name, data in all_results.items():
        avg_time = np.mean(data['times']) if data['times'] else 0
        avg_probes = np.mean(data['probes']) if data['probes'] else 0
        success_rate = np.mean(data['successes']) * 100 if data['successes'] else 0
        table_data.append([name, f"{avg_time:.2f}", f"{avg_probes:.2f}", f"{success_rate:.1f}%"])

    print(tabulate(table_data, headers=headers, tablefmt="grid"))

    if num_runs > 0:
        print("\nAnalysis:")
        print(f"Averaged over {num_runs} random queries on sequences of {size} elements.")
        print(f"Full scan averages {np.mean(all_results['Full Scan']['probes']):.2f} probes, "
              f"order-agnostic search {np.mean(all_results['Order-Agnostic (asc)']['probes']):.2f}, "
              f"log2(n) = {np.log2(size):.2f}.")
        print("-" * 80)

    return all_results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Benchmark binary search variants on generated or loaded sequences.")
    parser.add_argument("--size", type=int, default=100000,
                        help="Length of the generated sequences. Ignored when --csv is given.")
    parser.add_argument("--runs", type=int, default=10,
                        help="Number of random queries to average over.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random generator, for reproducible workloads.")
    parser.add_argument("--csv", type=str, default=None,
                        help="CSV file whose first column holds the integers to search.")
    parser.add_argument("--progress", action="store_true",
                        help="Show a progress bar over benchmark runs.")
    args = parser.parse_args()

    run_benchmark(args.size, args.runs, seed=args.seed, csv_path=args.csv, show_progress=args.progress)
