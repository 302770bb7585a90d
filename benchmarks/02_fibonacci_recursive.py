# Fibonacci Recursive Benchmark - Tests function call overhead and recursion
# This is deliberately naive (exponential) to stress test call stack

N = 40


def fib(n):
    if n < 2:
        return n
    return fib(n - 1) + fib(n - 2)


def main():
    print(fib(N))


if __name__ == "__main__":
    main()
