from ..report import CheckResult


def add_check(state, rule, fields):
    """One step of the checklist fold: returns a new (checks, passed) pair."""
    checks, passed = state
    ok = bool(rule.check(fields))
    result = CheckResult(label=rule.label, passed=ok, tip=rule.tip(fields))
    return checks + (result,), passed + (1 if ok else 0)


def percent(passed: int, total: int) -> int:
    """Integer percentage of passed over total, halves rounded up."""
    if total <= 0:
        return 0
    return (200 * passed + total) // (2 * total)
