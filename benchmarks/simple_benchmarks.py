from timeit import timeit

from scm.evaluation.evaluator import evaluate
from scm.evaluation.expander import parse
from scm.interpreter import Interpreter
from scm.types.environment import Environment
from scm.types.symbol import Symbol


def time_program(setup: str, code: str, rounds: int) -> float:
    """Time evaluation only: the setup is run once and `code` is parsed once,
    then the expanded tree is evaluated `rounds` times."""
    itp = Interpreter(prelude=None)
    itp.eval_all(setup)
    expr = parse(code)
    # Warmup
    evaluate(expr, itp.env)
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


def time_parse(code: str, rounds: int) -> float:
    return timeit(lambda: parse(code), number=rounds)


def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Binding lives at the root, looked up from the innermost frame
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42.0)
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    for _ in range(1000):
        env.lookup(key)
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY = ("", "((lambda (x y) (+ x y)) 1 2)")

FACT = (
    "(define fact (n) (if (<= n 1) 1 (* n (fact (- n 1)))))",
    "(fact 50)",
)

TAIL_LOOP = (
    "(define loop (n acc) (if (= n 0) acc (loop (- n 1) (+ acc 1))))",
    "(loop 5000 0)",
)

COMPOSE = (
    "(begin"
    " (define compose (f g) (lambda (x) (f (g x))))"
    " (define inc (lambda (x) (+ x 1)))"
    " (define twice (f) (compose f f)))",
    "((twice (twice inc)) 0)",
)

READER_INPUT = """
(begin
  (define fib (n) (if (< n 2) n (+ (fib (- n 1)) (fib (- n 2)))))
  (define xs (list 1 2 3 4 5 6 7 8 9 10))
  (quote (a b (c d) [[text block]] "string" 3.5 true)))
"""


def _report(name: str, seconds: float, rounds: int) -> None:
    print(f"Benchmark: {name}")
    print(f"  time: {seconds:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    _report("environment lookup chain", bench_lookup_chain(), 10000)
    _report("reader and expander", time_parse(READER_INPUT, 2000), 2000)
    _report("lambda application", time_program(*LAMBDA_APPLY, 20000), 20000)
    _report("recursive factorial", time_program(*FACT, 500), 500)
    _report("tail loop 5000", time_program(*TAIL_LOOP, 20), 20)
    _report("closure composition", time_program(*COMPOSE, 5000), 5000)
