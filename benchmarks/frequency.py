from collections import Counter

from rizipf import Zipf

TOTAL = 1000000


def harmonic(n: int, s: float) -> float:
    return sum(k**-s for k in range(1, n + 1))


def bench_frequencies(num_elements: int, exponent: float):
    z = Zipf(num_elements, exponent, seed=42, nolock=True)
    counter = Counter(z.get() for _ in range(TOTAL))
    norm = harmonic(num_elements, exponent)
    worst = 0.0
    for k in range(1, num_elements + 1):
        expected = k**-exponent / norm
        worst = max(worst, abs(counter[k] / TOTAL - expected))
    top = sum(count for _, count in counter.most_common(num_elements // 100 or 1))
    print(
        f"n={num_elements} s={exponent}: top 1% share {top / TOTAL:.2f}, max abs error {worst:.5f}"
    )


for exponent in [0.5, 1.0, 1.001, 1.08, 1.5, 2.0]:
    print(f"====== Exponent {exponent} ======")
    for n in [100, 1000, 10000]:
        bench_frequencies(n, exponent)
