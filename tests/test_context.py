import pytest

from ctensor.context import begin_eval, end_eval, eval_mode, is_eval


def test_not_eval_by_default():
    assert is_eval() is False


def test_begin_and_end():
    begin_eval()
    try:
        assert is_eval() is True
    finally:
        end_eval()
    assert is_eval() is False


def test_nesting_needs_matching_ends():
    begin_eval()
    begin_eval()
    end_eval()
    assert is_eval() is True
    end_eval()
    assert is_eval() is False


def test_eval_mode_context_manager():
    with eval_mode():
        assert is_eval() is True
        with eval_mode():
            assert is_eval() is True
        assert is_eval() is True
    assert is_eval() is False


def test_eval_mode_restores_on_error():
    with pytest.raises(KeyError):
        with eval_mode():
            raise KeyError("boom")
    assert is_eval() is False


def test_end_without_begin_raises():
    with pytest.raises(RuntimeError):
        end_eval()
    assert is_eval() is False