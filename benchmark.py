import sys
import time
from typing import List, Tuple

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns

from dna_cst_package import CompressedSuffixTrie, LETTERS
from dna_cst_package.logger import setup_logger

def generate_random_dna(length: int) -> str:
    """Generate a random DNA string of the given length"""
    return ''.join(np.random.choice(list(LETTERS), length))

def run_benchmark(text: str, builder: str, n_queries: int) -> Tuple[float, float]:
    """Build one trie and run queries; return build time and mean query time"""
    start_time = time.time()
    trie = CompressedSuffixTrie.from_text(text, builder=builder)
    build_time = time.time() - start_time

    # Query with substrings of the text so every search walks a real path
    starts = np.random.randint(0, max(len(text) - 20, 1), n_queries)
    patterns: List[str] = [text[s:s + 20] for s in starts]
    start_time = time.time()
    for p in patterns:
        trie.find_string(p)
    query_time = (time.time() - start_time) / n_queries

    return build_time, query_time

def main():
    # Test parameters
    text_lengths = [1_000, 2_000, 5_000, 10_000, 20_000]
    builders = ['ukkonen', 'naive']
    n_queries = 1_000

    if len(sys.argv) > 1:
        text_lengths = [int(x) for x in sys.argv[1].split(',')]

    setup_logger(verbose=True)
    results = []

    try:
        for length in text_lengths:
            text = generate_random_dna(length)
            for builder in builders:
                print(f"Testing: {builder} builder on a text of length {length}")
                build_time, query_time = run_benchmark(text, builder, n_queries)
                results.append({
                    'text_length': length,
                    'builder': builder,
                    'build_time': build_time,
                    'chars_per_second': length / build_time,
                    'mean_query_time': query_time,
                })

        df = pd.DataFrame(results)
        df.to_csv('benchmark_results.csv', index=False)

        print("\nBenchmark Summary:")
        print("=================")
        for length in text_lengths:
            data = df[df['text_length'] == length].set_index('builder')
            speedup = data.loc['naive', 'build_time'] / data.loc['ukkonen', 'build_time']
            print(f"\nText length {length}")
            print(f"Ukkonen build: {data.loc['ukkonen', 'build_time']:.3f}s, naive build: {data.loc['naive', 'build_time']:.3f}s ({speedup:.2f}x)")
            print(f"Mean query time: {data.loc['ukkonen', 'mean_query_time'] * 1e6:.1f}us")

        sns.set_theme(style='whitegrid')
        plt.figure(figsize=(12, 6))

        plt.subplot(1, 2, 1)
        sns.lineplot(data=df, x='text_length', y='build_time', hue='builder', marker='o')
        plt.xlabel('Text Length')
        plt.ylabel('Build Time (s)')
        plt.title('Construction Time vs Text Length')

        plt.subplot(1, 2, 2)
        sns.lineplot(data=df, x='text_length', y='mean_query_time', hue='builder', marker='o')
        plt.xlabel('Text Length')
        plt.ylabel('Mean Query Time (s)')
        plt.title('Query Time vs Text Length')

        plt.tight_layout()
        plt.savefig('benchmark_results.png', dpi=300, bbox_inches='tight')
        plt.close()

    except KeyboardInterrupt:
        print("\nBenchmark interrupted by user.")

if __name__ == '__main__':
    main()
