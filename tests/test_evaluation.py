import pytest

from scm import errors
from scm.evaluation.evaluator import evaluate
from scm.evaluation.expander import parse
from scm.printer import to_string
from scm.types.closure import Closure
from scm.types.forms import Begin, Define, If, Lambda, Quote
from scm.types.symbol import Symbol

# Each program runs in the same environment, in order; the expected value is
# the rendered result.
programs = [
    ("(quote ())", "()"),
    ("(quote (define a 1))", "(define a 1)"),
    ("(begin (define a 1) (+ 1 2 3))", "6"),
    ("a", "1"),
    ("(quote (testing 1 (2) -3.14e+159))", "(testing 1 (2) -3.14e+159)"),
    ("(+ 2 2)", "4"),
    ("(+ (* 2 100) (* 1 10))", "210"),
    ("(if (> 6 5) (+ 1 1) (+ 2 2))", "2"),
    ("(if (< 6 5) (+ 1 1) (+ 2 2))", "4"),
    ("(define x 3)", "3"),
    ("x", "3"),
    ("(+ x x)", "6"),
    ("((lambda (x) (+ x x)) 5)", "10"),
    ("(define twice (lambda (x) (* 2 x)))", "#<closure (x)>"),
    ("(twice 5)", "10"),
    ("(define compose (lambda (f g) (lambda (x) (f (g x)))))", "#<closure (f g)>"),
    ("((compose list twice) 5)", "(10)"),
    ("(define repeat (lambda (f) (compose f f)))", "#<closure (f)>"),
    ("((repeat twice) 5)", "20"),
    ("((repeat (repeat twice)) 5)", "80"),
    ("(define fact (lambda (n) (if (<= n 1) 1 (* n (fact (- n 1))))))", "#<closure (n)>"),
    ("(fact 3)", "6"),
    ("(fact 50)", "3.04141e+64"),
    ("(define abs (lambda (n) ((if (> n 0) + -) 0 n)))", "#<closure (n)>"),
    ("(list (abs -3) (abs 0) (abs 3))", "(3 0 3)"),
    ("(define square (x) (* x x))", "#<closure (x)>"),
    ("(square 12)", "144"),
    ("((lambda args args) 1 2 3)", "(1 2 3)"),
    ("((lambda args (length args)))", "0"),
    ('(car (list "a" true [[b]]))', '"a"'),
    ("(cdr (quote (1 2 3)))", "(2 3)"),
    ("pi", "3.14159"),
]


@pytest.fixture(scope="module")
def session():
    from scm.builtins import global_env
    return global_env()


@pytest.mark.parametrize("source,expected", programs)
def test_programs_eval(session, source, expected):
    assert to_string(evaluate(parse(source), session)) == expected


def test_literals_evaluate_to_themselves(env):
    assert evaluate(1.5, env) == 1.5
    assert evaluate(7, env) == 7
    assert evaluate("text", env) == "text"
    assert evaluate(True, env) is True


def test_symbol_lookup(env):
    assert evaluate(Symbol("pi"), env) == pytest.approx(3.14159265)
    with pytest.raises(errors.ScmUnboundSymbol) as info:
        evaluate(Symbol("nope"), env)
    assert info.value.symbol == Symbol("nope")


def test_define_returns_the_value_and_binds_locally(env):
    assert evaluate(Define(Symbol("k"), [Symbol("+"), 1.0, 2.0]), env) == 3.0
    assert env.vars[Symbol("k")] == 3.0


def test_lambda_captures_the_current_environment(env):
    fn = evaluate(Lambda([Symbol("x")], Symbol("x")), env)
    assert isinstance(fn, Closure)
    assert fn.env is env


def test_quote_returns_body_unevaluated(env):
    body = [Symbol("undefined-thing"), [Symbol("if"), 1.0]]
    assert evaluate(Quote(body), env) is body


def test_if_requires_a_boolean_test(env):
    with pytest.raises(errors.ScmTypeError):
        evaluate(If(1.0, 2.0, 3.0), env)
    with pytest.raises(errors.ScmTypeError):
        evaluate(parse("(if (list) 1 2)"), env)


def test_only_the_chosen_branch_runs(env):
    assert evaluate(parse("(if true 1 undefined-symbol)"), env) == 1.0
    assert evaluate(parse("(if false (car (list)) 2)"), env) == 2.0


def test_begin_evaluates_in_order(env):
    node = Begin((Define(Symbol("a"), 1.0), Define(Symbol("a"), [Symbol("+"), Symbol("a"), 1.0]), Symbol("a")))
    assert evaluate(node, env) == 2.0


def test_arguments_evaluate_left_to_right(env):
    src = "(list (define n 1) (define n (+ n 1)) (define n (* n 10)))"
    assert evaluate(parse(src), env) == [1.0, 2.0, 20.0]


def test_closure_values_can_be_applied_directly(env):
    fn = evaluate(parse("(lambda (a b) (- a b))"), env)
    assert evaluate([fn, 10.0, 4.0], env) == 6.0


def test_application_of_non_callables(env):
    for src in ("(1 2 3)", '("f" 1)', "(true)", "((quote (a)) 1)"):
        with pytest.raises(errors.ScmNotCallable, match="undefined function"):
            evaluate(parse(src), env)
    with pytest.raises(errors.ScmNotCallable):
        evaluate(parse("()"), env)


def test_closure_arity_mismatch(env):
    with pytest.raises(errors.ScmArityError):
        evaluate(parse("((lambda (x y) x) 1)"), env)


def test_define_inside_a_closure_stays_local(env):
    evaluate(parse("(define g (lambda (v) (begin (define inner v) inner)))"), env)
    assert evaluate(parse("(g 5)"), env) == 5.0
    with pytest.raises(errors.ScmUnboundSymbol):
        evaluate(Symbol("inner"), env)


def test_closures_see_later_definitions_in_their_environment(env):
    evaluate(parse("(define h (lambda () late))"), env)
    evaluate(parse("(define late 42)"), env)
    assert evaluate(parse("(h)"), env) == 42.0


def test_define_in_a_callee_does_not_reach_the_captured_frame(env):
    evaluate(parse("(define make (lambda (n) (list (lambda () n) (lambda (m) (define n m)))))"), env)
    evaluate(parse("(define pair (make 1))"), env)
    evaluate(parse("(define get (car pair))"), env)
    # define in the setter's own frame, not the shared one
    evaluate(parse("((car (cdr pair)) 99)"), env)
    assert evaluate(parse("(get)"), env) == 1.0


def test_expansion_errors_happen_before_evaluation(interp):
    with pytest.raises(errors.ScmExpansionError):
        interp.eval("(begin (define z 1) (if z))")
    with pytest.raises(errors.ScmUnboundSymbol):
        interp.eval("z")


def test_quote_ignores_unbound_and_malformed_contents(interp):
    assert interp.rep("(quote (nope (if) (lambda)))") == "(nope (if) (lambda))"
