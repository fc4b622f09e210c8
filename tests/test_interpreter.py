import pytest

from polish.errors import PolishArithmeticError, PolishError, PolishNameError, PolishRuntimeError


FACTORIAL = """
# factorial, recursive through its own placeholder
\\fac n -> if = n 0 1 * n fac - n 1

\\main -> fac 5
"""


def test_run_main(interp):
    interp.load(FACTORIAL)
    assert interp.run_main() == 120


def test_missing_main(interp):
    interp.load("\\notmain -> 1")
    with pytest.raises(PolishRuntimeError) as exc:
        interp.run_main()
    assert exc.value.message == "no main function found"


@pytest.mark.parametrize("program", ["\\main x -> x", ""])
def test_main_must_be_zero_argument_user_function(interp, program):
    interp.load(program)
    with pytest.raises(PolishRuntimeError):
        interp.run_main()


def test_failed_load_leaves_environment_unmodified(interp):
    interp.load("\\one -> 1")
    before = interp.env.size()
    with pytest.raises(PolishNameError) as exc:
        interp.load("\\two -> 2\n\\one -> missing", origin="broken.pn")
    assert interp.env.size() == before
    assert "two" not in interp.env
    # the earlier definition of `one` survives, not a placeholder
    assert interp.eval("one") == 1
    assert exc.value.origin == "broken.pn"
    assert exc.value.source.startswith("\\two")


def test_loads_accumulate(interp):
    interp.load("\\sq x -> * x x")
    interp.load("\\main -> sq 9")
    assert interp.run_main() == 81


def test_eval_expression_and_declaration(interp):
    assert interp.eval("\\inc x -> + x 1") is None
    assert interp.eval("inc 41") == 42
    assert interp.eval("") is None


def test_eval_error_does_not_change_environment(interp):
    with pytest.raises(PolishNameError):
        interp.eval("\\bad -> nowhere")
    assert "bad" not in interp.env
    with pytest.raises(PolishArithmeticError):
        interp.eval("/ 1 0")
    assert interp.eval("+ 1 1") == 2


def test_eval_errors_carry_the_input_line(interp):
    with pytest.raises(PolishError) as exc:
        interp.eval("+ 1 nope")
    assert exc.value.source == "+ 1 nope"
    assert exc.value.origin == "<input>"


def test_print_goes_to_interpreter_output(interp, output):
    interp.load('\\main -> print "hello"')
    interp.run_main()
    assert output.getvalue() == "hello\n"


def test_load_file(interp, tmp_path):
    path = tmp_path / "fac.pn"
    path.write_text(FACTORIAL)
    declared = interp.load_file(path)
    assert [s.name for s in declared] == ["fac", "main"]
    assert interp.run_main() == 120


def test_run_file(interp, tmp_path):
    path = tmp_path / "prog.pn"
    path.write_text("\\main -> fuse 1 pair 2 3")
    assert interp.run_file(path) == [1, 2, 3]


def test_load_file_uses_search_path(interp, tmp_path, monkeypatch):
    (tmp_path / "lib.pn").write_text("\\seven -> 7")
    monkeypatch.setenv("POLISH_PATH", str(tmp_path))
    monkeypatch.chdir(tmp_path.parent)
    interp.load_file("lib")
    assert interp.eval("seven") == 7


def test_load_missing_file(interp, tmp_path):
    with pytest.raises(PolishError) as exc:
        interp.load_file(tmp_path / "absent.pn")
    assert exc.value.message.startswith("could not open")


def test_deep_recursion_hits_native_limit(interp):
    interp.load("\\down n -> if = n 0 0 down - n 1")
    with pytest.raises(RecursionError):
        interp.eval("down 1000000")


def test_load_file_that_is_not_utf8(interp, tmp_path):
    path = tmp_path / "bad.pn"
    path.write_bytes(b'\\main -> "\xff"\n')
    with pytest.raises(PolishError) as exc:
        interp.load_file(path)
    assert exc.value.message == f"could not decode {path} as UTF-8"
    assert "main" not in interp.env
