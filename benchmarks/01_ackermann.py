# Ackermann Function Benchmark - Extreme recursion stress test
# Prints A(3, 11) and nothing else; time it from the outside.

import sys

# A(3, 11) recurses roughly 2^14 frames deep
sys.setrecursionlimit(100000)

M = 3
N = 11


def ackermann(m, n):
    if m == 0:
        return n + 1
    if n == 0:
        return ackermann(m - 1, 1)
    return ackermann(m - 1, ackermann(m, n - 1))


def main():
    print(ackermann(M, N))


if __name__ == "__main__":
    main()
