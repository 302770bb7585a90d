# Trial Division Benchmark - Tests loops, modulo and conditionals
# The loop stops below n // 2, so 4 and anything smaller reports as prime.

N = 314606869


def is_prime(n):
    i = 2
    m = n // 2
    while i < m:
        if n % i == 0:
            return 0
        i = i + 1
    return 1


def main():
    print(is_prime(N))


if __name__ == "__main__":
    main()
