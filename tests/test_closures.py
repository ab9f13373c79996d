import pytest
from hypothesis import given, strategies as st

from fraction.errors import CannotCallValue, IncorrectNumberOfArgs, UndefinedVariable
from fraction.evaluation.evaluator import evaluate, invoke
from fraction.types.builtin import Builtin
from fraction.types.closure import Closure
from fraction.types.environment import Environment
from fraction.types.expression import Application, Atomic, Lambda, Variable
from fraction.types.glyph import Glyph
from fraction.types.name import Name
from fraction.types.number import Integer
from fraction.types.plist import PList


def args_of(*values):
    return [Atomic(Integer(v)) for v in values]


@given(
    n=st.integers(min_value=0, max_value=6),
    actual=st.integers(min_value=0, max_value=8),
)
def test_non_variadic_arity_must_match(n, actual):
    names = [f"p{i}" for i in range(n)]
    closure = Closure(Environment(), Atomic(Integer(0)), names)
    expr = Application(Atomic(closure), args_of(*range(actual)))
    if actual == n:
        assert evaluate(expr, Environment()) == Integer(0)
    else:
        with pytest.raises(IncorrectNumberOfArgs) as exc:
            evaluate(expr, Environment())
        assert (exc.value.expected, exc.value.actual) == (n, actual)


def test_variadic_accepts_extra_arguments_and_returns_first(env):
    # f(a, b, rest.) -> a
    f = Lambda(("a", "b", "rest"), Variable("a"), variadic=True)
    expr = Application(f, args_of(1, 2, 3, 4, 5))
    assert evaluate(expr, env) == Integer(1)


def test_variadic_rest_is_bound_to_excess_arguments(env):
    f = Lambda(("a", "b", "rest"), Variable("rest"), variadic=True)
    assert evaluate(Application(f, args_of(1, 2, 3, 4, 5)), env) == PList.of(Integer(3), Integer(4), Integer(5))
    assert evaluate(Application(f, args_of(1, 2, 3)), env) == PList.of(Integer(3))


def test_variadic_still_requires_every_named_parameter(env):
    f = Lambda(("a", "b", "rest"), Variable("a"), variadic=True)
    with pytest.raises(IncorrectNumberOfArgs) as exc:
        evaluate(Application(f, args_of(1, 2)), env)
    assert (exc.value.expected, exc.value.actual) == (3, 2)


def test_variadic_without_names_ignores_arguments(env):
    f = Lambda((), Atomic(Integer(7)), variadic=True)
    assert evaluate(Application(f, args_of(1, 2, 3)), env) == Integer(7)
    assert evaluate(Application(f, []), env) == Integer(7)


def test_closure_frame_parent_is_captured_env():
    defining = Environment(None, [("k", Integer(1))])
    closure = Closure(defining, Variable("a"), ["a"])
    frame = closure.extend_env([Integer(5)])
    assert frame.parent is defining
    assert dict(frame.mappings) == {Name("a"): Integer(5)}


def test_lexical_capture_ignores_callers_binding():
    root = Environment(None, [("y", Integer(10))])
    closure = evaluate(Lambda((), Variable("y")), root)
    # Sibling branch of the defining environment rebinding y
    sibling = root.extend([("y", Integer(20)), ("f", closure)])
    assert evaluate(Variable("y"), sibling) == Integer(20)
    assert evaluate(Application(Variable("f"), []), sibling) == Integer(10)


def test_callers_locals_are_not_visible():
    root = Environment()
    closure = evaluate(Lambda((), Variable("local")), root)
    caller = root.extend([("local", Integer(1))])
    with pytest.raises(UndefinedVariable):
        evaluate(Application(Atomic(closure), []), caller)


def test_closure_observes_parent_chain_visible_at_call_time(env):
    # g closes over the frame where n is bound; calling later still sees it
    make = Lambda(("n",), Lambda((), Variable("n")))
    g = evaluate(Application(make, args_of(3)), env)
    assert invoke(g, []) == Integer(3)
    assert g.invoke([]) == Integer(3)


def test_duplicate_parameter_names_last_wins(env):
    f = Lambda(("a", "a"), Variable("a"))
    assert evaluate(Application(f, args_of(1, 2)), env) == Integer(2)


def test_arguments_bind_positionally(env):
    f = Lambda(("a", "b"), Application(Variable("sub"), [Variable("a"), Variable("b")]))
    assert evaluate(Application(f, args_of(10, 4)), env) == Integer(6)


def test_closure_rendering_and_immutability():
    closure = Closure(Environment(), Variable("a"), ["a", "b", "c", "x"], variadic=True)
    assert str(closure) == "(a, b, c, x.) -> a"
    with pytest.raises(AttributeError):
        closure.variadic = False


def test_invoke_reports_arity_errors():
    closure = Closure(Environment(), Variable("a"), ["a"])
    with pytest.raises(IncorrectNumberOfArgs):
        closure.invoke([])


@pytest.mark.parametrize("head", [Integer(5), Glyph("f"), PList(), Variable("add")])
def test_invoke_rejects_non_callables(head):
    with pytest.raises(CannotCallValue):
        invoke(head, [Integer(1)])


def test_invoke_calls_builtins_with_argument_tuple(env):
    seen = []

    def record(args):
        seen.append(args)
        return Integer(len(args))

    assert invoke(Builtin("record", record), [Integer(1), Integer(2)]) == Integer(2)
    assert seen == [(Integer(1), Integer(2))]
    assert invoke(env.lookup("add"), [Integer(2), Integer(3)]) == Integer(5)


def test_application_checks_the_operator_once(env, monkeypatch):
    from fraction.evaluation import apply as apply_module
    from fraction.evaluation import evaluator as evaluator_module

    checked = []
    original = apply_module.ensure_callable

    def counting(value):
        checked.append(value)
        return original(value)

    monkeypatch.setattr(apply_module, "ensure_callable", counting)
    monkeypatch.setattr(evaluator_module, "ensure_callable", counting)
    f = Lambda(("a",), Variable("a"))
    assert evaluate(Application(f, args_of(4)), env) == Integer(4)
    assert len(checked) == 1
