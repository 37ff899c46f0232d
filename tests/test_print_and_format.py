import pytest
from hypothesis import given, strategies as st

from scm.builtins import add
from scm.evaluation.evaluator import evaluate
from scm.evaluation.expander import parse
from scm.printer import to_string
from scm.types.closure import Closure
from scm.types.environment import Environment
from scm.types.forms import Begin, Define, If, Import, Lambda, Quote
from scm.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        ([], "()"),
        ([Symbol("a"), [1.0, []], "t"], '(a (1 ()) "t")'),
        (True, "true"),
        (False, "false"),
        (4.0, "4"),
        (7, "7"),
        (-0.5, "-0.5"),
        (210.0, "210"),
        (1234567.0, "1.23457e+06"),
        (0.0001, "0.0001"),
        (0.00001, "1e-05"),
        (-3.14e159, "-3.14e+159"),
        (float("inf"), "inf"),
        (Symbol("set-car!"), "set-car!"),
        ("a b", '"a b"'),
        (Define(Symbol("a"), 1.0), "(define a 1)"),
        (Define(Symbol("f"), Quote([Symbol("x")])), "(define f (quote (x)))"),
        (Quote([Symbol("testing"), 1.0]), "(quote (testing 1))"),
    ]
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_opaque_renderings_are_distinct():
    rendered = {
        to_string(Closure([Symbol("x")], Symbol("x"), Environment())),
        to_string(Closure(Symbol("xs"), Symbol("xs"), Environment())),
        to_string(add),
        to_string(If(True, 1.0, 2.0)),
        to_string(Lambda([], 1.0)),
        to_string(Begin((1.0,))),
        to_string(Import("", "x.scm")),
    }
    assert rendered == {
        "#<closure (x)>",
        "#<closure xs>",
        "#<primitive +>",
        "#<if>",
        "#<lambda>",
        "#<begin>",
        "#<import>",
    }


# -------------------------------
# Round trip of quoted literal data
# -------------------------------
symbol_strat = st.text(
    st.sampled_from("abcdefghijklmnopqrstuvwxyz-?!*<>="), min_size=1, max_size=8
).filter(lambda s: s[0].isalpha() and not s.startswith(("true", "false")))

number_strat = st.integers(min_value=-99999, max_value=99999).map(str)
text_strat = st.text(st.sampled_from("abc XYZ\n"), max_size=8).map(lambda s: f'"{s}"')
bool_strat = st.sampled_from(["true", "false"])

literal_strat = st.recursive(
    st.one_of(symbol_strat, number_strat, text_strat, bool_strat),
    lambda children: st.lists(children, max_size=4).map(lambda xs: "(" + " ".join(xs) + ")"),
    max_leaves=15,
)


@given(literal_strat)
def test_quoted_literals_render_back_to_source(src):
    source = f"(quote {src})"
    assert to_string(parse(source)) == source
    assert to_string(evaluate(parse(source), Environment())) == src
