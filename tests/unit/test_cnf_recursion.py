"""
Тесты для CNF Recursion — well-founded рекурсия по остаткам

Проверяемые инварианты:
1. Остаток o mod b^log_b(o) строго меньше o
2. cnf_rec вычисляет C(o) снизу вверх без роста стека
3. Сломанная арифметика → CNFInvariantViolation, а не бесконечный цикл
4. Лимит max_terms
"""

import logging

import pytest

from ordinal_cnf.core.math import (
    NATURAL,
    CNFConfig,
    CNFInvariantViolation,
    NaturalArithmetic,
    cnf_rec,
    cnf_remainder,
    cnf_step,
    iter_cnf_steps,
)


class StuckModArithmetic(NaturalArithmetic):
    """Арифметика с ошибкой: mod возвращает само значение."""

    def mod(self, o, d):
        return o


class GrowingModArithmetic(NaturalArithmetic):
    """Арифметика с ошибкой: остаток больше исходного значения."""

    def mod(self, o, d):
        return o + 1


# =============================================================================
# ТЕСТЫ: остаток
# =============================================================================


class TestCNFRemainder:
    """Тесты убывающей меры."""

    def test_known_values(self):
        assert cnf_remainder(2, 5) == 1
        assert cnf_remainder(10, 1234) == 234
        assert cnf_remainder(3, 9) == 0

    @pytest.mark.parametrize("b", [0, 1, 2, 3, 10])
    def test_strict_decrease(self, b):
        """Для o != 0 остаток строго меньше o."""
        for o in range(1, 500):
            assert cnf_remainder(b, o) < o

    def test_degenerate_base_remainder_is_zero(self):
        """При b <= 1 степень равна 1, остаток 0."""
        assert cnf_remainder(0, 7) == 0
        assert cnf_remainder(1, 7) == 0

    def test_step_fields(self):
        step = cnf_step(10, 1234)
        assert step.value == 1234
        assert step.exponent == 3
        assert step.power == 1000
        assert step.remainder == 234


# =============================================================================
# ТЕСТЫ: цепочка шагов
# =============================================================================


class TestIterCNFSteps:
    """Тесты итератора шагов."""

    def test_zero_is_empty(self):
        assert list(iter_cnf_steps(2, 0)) == []

    def test_chain_values(self):
        chain = [s.value for s in iter_cnf_steps(10, 1204)]
        assert chain == [1204, 204, 4]

    def test_lazy(self):
        """Итератор ленивый: первый шаг доступен без обхода всей цепочки."""
        steps = iter_cnf_steps(2, 2**100 - 1)
        first = next(steps)
        assert first.exponent == 99

    def test_deep_chain_no_recursion_limit(self):
        """Число членов больше лимита рекурсии Python."""
        o = 2**5000 - 1  # 5000 единичных битов
        assert sum(1 for _ in iter_cnf_steps(2, o)) == 5000

    def test_stuck_mod_raises(self):
        """Остаток равен значению → нарушение инварианта."""
        with pytest.raises(CNFInvariantViolation, match="not smaller"):
            list(iter_cnf_steps(2, 5, arithmetic=StuckModArithmetic()))

    def test_growing_mod_raises(self):
        with pytest.raises(CNFInvariantViolation):
            list(iter_cnf_steps(3, 10, arithmetic=GrowingModArithmetic()))

    def test_violation_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="ordinal_cnf.core.math.cnf_recursion"):
            with pytest.raises(CNFInvariantViolation):
                list(iter_cnf_steps(2, 5, arithmetic=StuckModArithmetic()))
        assert "CNF invariant violation" in caplog.text

    def test_max_terms_exceeded(self):
        with pytest.raises(CNFInvariantViolation, match="max_terms=2"):
            list(iter_cnf_steps(2, 7, config=CNFConfig(max_terms=2)))

    def test_max_terms_exact(self):
        """Ровно max_terms членов допустимо."""
        steps = list(iter_cnf_steps(2, 7, config=CNFConfig(max_terms=3)))
        assert len(steps) == 3

    def test_negative_max_terms_rejected(self):
        with pytest.raises(ValueError, match="max_terms"):
            CNFConfig(max_terms=-1)


# =============================================================================
# ТЕСТЫ: cnf_rec
# =============================================================================


class TestCNFRec:
    """Тесты принципа рекурсии."""

    def test_base_case_for_zero(self):
        assert cnf_rec(2, 0, "base", lambda o, acc: acc + "!") == "base"

    def test_term_count(self):
        def count(_o, n):
            return n + 1

        assert cnf_rec(2, 5, 0, count) == 2
        assert cnf_rec(10, 1204, 0, count) == 3
        assert cnf_rec(1, 7, 0, count) == 1

    def test_step_receives_result_for_remainder(self):
        """step(o, C(остаток)): собираем значения цепочки снизу вверх."""
        collected = cnf_rec(10, 1204, (), lambda o, acc: acc + (o,))
        assert collected == (4, 204, 1204)

    def test_rebuilds_cnf(self):
        """Через cnf_rec можно выразить сам кодировщик."""

        def step(o, rest):
            e = NATURAL.log(3, o)
            return [(e, o // 3**e)] + rest

        assert cnf_rec(3, 10, [], step) == [(2, 1), (0, 1)]

    def test_broken_arithmetic_raises(self):
        with pytest.raises(CNFInvariantViolation):
            cnf_rec(2, 5, 0, lambda _o, n: n + 1, arithmetic=StuckModArithmetic())
