import io

import pytest

from scm.errors import ScmExpansionError, ScmSyntaxError
from scm.interpreter import Interpreter
from scm.repl import main, run_loop


def test_eval_reads_exactly_one_value(interp):
    assert interp.eval("(+ 1 2)") == 3.0
    with pytest.raises(ScmSyntaxError):
        interp.eval("(+ 1 2) (+ 3 4)")


def test_eval_all_returns_every_result(interp):
    assert interp.eval_all("(define x 2) (define y 3) (* x y)") == [2.0, 3.0, 6.0]
    assert interp.eval_all("") == []


def test_rep_renders(interp):
    assert interp.rep("(list 1 (quote a) \"s\" true)") == '(1 a "s" true)'


def test_definitions_persist_across_calls(interp):
    interp.eval("(define x 3)")
    assert interp.eval("(+ x x)") == 6.0


def test_eval_file(interp, tmp_path):
    src = tmp_path / "prog.scm"
    src.write_text("(define base 10)\n(define add (n) (+ base n))\n", encoding="utf-8")
    interp.eval_file(src)
    assert interp.eval("(add 5)") == 15.0


def test_prelude_string():
    itp = Interpreter(prelude="(define answer 42)")
    assert itp.eval("answer") == 42.0


def test_prelude_from_environment(tmp_path, monkeypatch):
    prelude = tmp_path / "prelude.scm"
    prelude.write_text("(define inc (x) (+ x 1))", encoding="utf-8")
    monkeypatch.setenv("SCM_PRELUDE", str(prelude))
    assert Interpreter().eval("(inc 1)") == 2.0


def test_missing_prelude_is_not_fatal(tmp_path, monkeypatch):
    monkeypatch.setenv("SCM_PRELUDE", str(tmp_path / "missing.scm"))
    assert Interpreter().eval("(+ 1 1)") == 2.0


def test_sessions_are_independent():
    a, b = Interpreter(prelude=None), Interpreter(prelude=None)
    a.eval("(define only-a 1)")
    assert b.eval_all("(define only-a 2) only-a") == [2.0, 2.0]
    assert a.eval("only-a") == 1.0


def test_failed_expansion_leaves_the_session_untouched(interp):
    with pytest.raises(ScmExpansionError):
        interp.eval("(begin (define x 1) (lambda))")
    assert interp.eval_all("(define x 5) x") == [5.0, 5.0]


# -------------------------------
# Console REPL
# -------------------------------
def test_run_loop_prints_results_and_reports_errors(interp):
    stdin = io.StringIO("(define x 3)\n\n(+ x x)\nnope\n(car (list))\n(+ 1 2\n")
    out, err = io.StringIO(), io.StringIO()
    run_loop(interp, stdin, out, err)
    assert out.getvalue() == "> 3\n> > 6\n> > > > \n"
    errors = err.getvalue().splitlines()
    assert errors[0] == "error: undefined symbol: nope"
    assert errors[1] == "error: car of an empty list"
    assert errors[2].startswith("error: Unmatched '('")


def test_main_evaluates_expressions(capsys):
    assert main(["-e", "(+ 2 2)", "-e", "(list 1 2)"]) == 0
    assert capsys.readouterr().out == "4\n(1 2)\n"


def test_main_reports_failures(capsys):
    assert main(["-e", "nope", "-e", "(+ 1 1)"]) == 1
    captured = capsys.readouterr()
    assert captured.out == "2\n"
    assert "error: undefined symbol: nope" in captured.err


def test_main_loads_files_first(tmp_path, capsys):
    src = tmp_path / "defs.scm"
    src.write_text("(define x 2) (define y 3)", encoding="utf-8")
    assert main([str(src), "-e", "(* x y)"]) == 0
    assert capsys.readouterr().out == "6\n"


def test_main_reports_missing_files(tmp_path, capsys):
    assert main([str(tmp_path / "none.scm"), "-e", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert captured.err.startswith("error:")


def test_main_runs_the_prompt_without_expressions(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("(+ 40 2)\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "> 42\n> \n"
