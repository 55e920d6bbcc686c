import pytest

from fwrange import domains, transfer
from fwrange.constants import ops
from fwrange.domain_ops import boolean_ops
from fwrange.errors import ContractViolation


i8 = domains.fixed_width(8)
i16 = domains.fixed_width(16)


def test_join_of_singletons():
    assert i8.join(i8.build(5), i8.build(10)) == (5, 10)


def test_add_overflow_gives_top():
    assert i8.is_top(transfer.apply(i8, ops.ADD, (120, 125), i8.build(10)))


def test_guard_keeps_operands_that_always_hold():
    assert transfer.filter(i8, ops.SLE, (-5, -1), 0) == ((-5, -1), (0, 0))


@pytest.mark.parametrize('opcode', [
    ops.ADD, ops.SUB, ops.MUL, ops.SDIV, ops.UDIV, ops.SREM, ops.UREM,
    ops.AND, ops.OR, ops.XOR, ops.SHL, ops.LSHR, ops.ASHR,
])
def test_top_operand_gives_top(opcode):
    assert i8.is_top(transfer.apply(i8, opcode, i8.top, i8.build(1)))


def test_truncate_wide_interval_gives_top():
    res = transfer.apply_cast(ops.TRUNC, (1000, 2000), i16, 8)
    assert i8.is_top(res)


def test_apply():
    assert transfer.apply(i8, ops.SUB, (0, 10), (1, 2)) == (-2, 9)
    assert transfer.apply(i8, ops.AND, (0, 10), (4, 4)) == (0, 4)
    assert transfer.binary_transfer(8, ops.MUL) is (
        transfer.binary_transfer(8, ops.MUL)
    )

    with pytest.raises(ContractViolation):
        transfer.apply(i8, 'pow', (0, 1), (0, 1))


def test_evaluate():
    res = transfer.evaluate(i8, ops.SLT, (0, 3), (4, 9))
    assert boolean_ops.Boolean.eq(res, boolean_ops.true)
    res = transfer.evaluate(i8, ops.ULT, (-1, -1), (4, 9))
    assert boolean_ops.Boolean.eq(res, boolean_ops.false)

    with pytest.raises(ContractViolation):
        transfer.evaluate(i8, ops.TRUNC, (0, 3), (4, 9))


def test_apply_cast():
    assert transfer.apply_cast(ops.EXT, (-1, -1), i8, 16) == (255, 255)
    assert transfer.apply_cast(ops.EXT, (-1, -1), i8, 16,
                               sign_extend=True) == (-1, -1)
    assert transfer.apply_cast(ops.TRUNC, (256, 300), i16, 8) == (0, 44)

    with pytest.raises(ContractViolation):
        transfer.apply_cast('bitcast', (0, 1), i8, 16)


def test_apply_cast_with_boolean_hint():
    i1 = domains.fixed_width(1)
    res = transfer.apply_cast(ops.EXT, i1.top, i1, 8,
                              bool_hint=boolean_ops.true)
    assert res == (1, 1)

    res = transfer.apply_cast(ops.EXT, i1.top, i1, 8,
                              bool_hint=boolean_ops.true, sign_extend=True)
    assert res == (-1, -1)

    res = transfer.apply_cast(ops.EXT, i1.top, i1, 8,
                              bool_hint=boolean_ops.both)
    assert res == (0, 1)


def test_filter_two_vars():
    assert transfer.filter(i8, ops.SGT, (0, 10), (3, 20)) == (
        (4, 10), (3, 9)
    )
    assert transfer.filter(i8, ops.EQ, (0, 10), (5, 20)) == (
        (5, 10), (5, 10)
    )


def test_bool_interval():
    assert transfer.bool_interval(i8, boolean_ops.false) == (0, 0)
    with pytest.raises(ContractViolation):
        transfer.bool_interval(i8, frozenset(['maybe']))


def test_cast_results_work_with_any_domain_of_the_target_width():
    own_i8 = domains.Intervals(8)
    res = transfer.apply_cast(
        ops.TRUNC, (1000, 2000), domains.Intervals(16), 8
    )
    assert own_i8.is_top(res)
    assert own_i8.is_top(own_i8.join(res, (1, 2)))
    assert own_i8.meet(res, (1, 2)) == (1, 2)

    res = transfer.apply_cast(ops.TRUNC, (256, 300), i16, 8)
    assert transfer.apply(own_i8, ops.ADD, res, (1, 1)) == (1, 45)


def test_transfer_functions_are_shared_by_width():
    own_i8 = domains.Intervals(8)
    assert transfer.apply(own_i8, ops.MUL, (2, 3), (4, 5)) == (8, 15)
    assert transfer.binary_transfer(own_i8.width, ops.MUL) is (
        transfer.binary_transfer(i8.width, ops.MUL)
    )


def test_operands_of_another_width_are_rejected():
    with pytest.raises(ContractViolation):
        transfer.filter(i8, ops.SLE, (0, 300), 5)
    with pytest.raises(ContractViolation):
        transfer.filter(i8, ops.SLE, (0, 5), (0, 300))
    with pytest.raises(ContractViolation):
        transfer.apply_cast(ops.TRUNC, (1000, 1010), i8, 4)
    with pytest.raises(ContractViolation):
        transfer.apply(i8, ops.ADD, (0, 300), (1, 1))
    with pytest.raises(ContractViolation):
        transfer.evaluate(i8, ops.SLT, (0, 3), (-200, 9))
    with pytest.raises(ContractViolation):
        transfer.apply(i8, ops.ADD, (5, 1), (1, 1))
