import numpy as np
import pandas as pd
import pytest
from cifplot.data import CurveSeries, CompetingRisksResult, MultiStateResult, DataValidator
from cifplot.exceptions import InvalidResultShape

def test_curve_series_initialization():
    """Test initialization of CurveSeries"""
    curve = CurveSeries([1, 2, 3], [0.1, 0.2, 0.3], [0.01, 0.02, 0.03])
    assert np.array_equal(curve.time, [1.0, 2.0, 3.0])
    assert np.array_equal(curve.estimate, [0.1, 0.2, 0.3])
    assert np.array_equal(curve.variance, [0.01, 0.02, 0.03])
    assert len(curve) == 3

def test_curve_series_without_variance():
    """Test that variance is optional"""
    curve = CurveSeries(pd.Series([0.5, 1.5]), pd.Series([0.0, 0.4]))
    assert curve.variance is None
    assert len(curve) == 2

def test_curve_series_validation():
    """Test validation of CurveSeries"""
    # Mismatched lengths
    with pytest.raises(InvalidResultShape):
        CurveSeries([1, 2, 3], [0.1, 0.2])

    # Variance of the wrong length
    with pytest.raises(InvalidResultShape):
        CurveSeries([1, 2], [0.1, 0.2], [0.01])

    # Not one-dimensional
    with pytest.raises(InvalidResultShape):
        CurveSeries([[1, 2]], [[0.1, 0.2]])

def test_competing_risks_result_keeps_order():
    """Test that curve keys keep their insertion order"""
    fit = CompetingRisksResult({
        "B death": CurveSeries([1], [0.1]),
        "A death": CurveSeries([1], [0.2]),
        "A progression": CurveSeries([1], [0.3]),
    })
    assert fit.keys() == ["B death", "A death", "A progression"]
    assert len(fit) == 3
    assert fit.kind == "cuminc"

def test_competing_risks_result_moves_tests_entry():
    """Test that a Tests entry never becomes a curve"""
    summary = {"stat": [1.2], "pv": [0.27]}
    fit = CompetingRisksResult({
        "A death": CurveSeries([1, 2], [0.1, 0.2]),
        "Tests": summary,
    })
    assert fit.keys() == ["A death"]
    assert fit.tests is summary

def test_competing_risks_result_explicit_tests_wins():
    """Test that an explicit tests argument is not overwritten"""
    fit = CompetingRisksResult({"Tests": "from mapping"}, tests="explicit")
    assert len(fit) == 0
    assert fit.tests == "explicit"

def test_competing_risks_result_validation():
    """Test validation of CompetingRisksResult"""
    with pytest.raises(InvalidResultShape):
        CompetingRisksResult({"A death": [(1, 0.1)]})

    with pytest.raises(InvalidResultShape):
        CompetingRisksResult({1: CurveSeries([1], [0.1])})

def test_multi_state_result_initialization():
    """Test initialization of MultiStateResult"""
    pstate = np.array([[1.0, 0.0], [0.8, 0.2], [0.6, 0.4]])
    fit = MultiStateResult([0, 1, 2], pstate, ["(s0)", "death"])
    assert fit.kind == "survfitms"
    assert fit.n_states == 2
    assert fit.strata is None
    assert np.array_equal(fit.pstate, pstate)

def test_multi_state_result_accepts_dataframe():
    """Test that a DataFrame can be passed as the probability matrix"""
    pstate = pd.DataFrame({"a": [0.5, 0.4], "b": [0.5, 0.6]})
    fit = MultiStateResult([1, 2], pstate, ["a", "b"], strata={"x": 2})
    assert fit.pstate.shape == (2, 2)
    assert fit.strata == {"x": 2}

def test_multi_state_result_validation():
    """Test validation of MultiStateResult"""
    pstate = np.full((5, 2), 0.5)

    # Time points and rows disagree
    with pytest.raises(InvalidResultShape):
        MultiStateResult(np.arange(4), pstate, ["a", "b"])

    # States and columns disagree
    with pytest.raises(InvalidResultShape):
        MultiStateResult(np.arange(5), pstate, ["a", "b", "c"])

    # Strata counts do not cover all rows
    with pytest.raises(InvalidResultShape):
        MultiStateResult(np.arange(5), pstate, ["a", "b"], strata={"A": 3, "B": 1})

    # Negative strata count
    with pytest.raises(InvalidResultShape):
        MultiStateResult(np.arange(5), pstate, ["a", "b"], strata={"A": 6, "B": -1})

    # Not a matrix
    with pytest.raises(InvalidResultShape):
        MultiStateResult(np.arange(5), np.full(5, 0.5), ["a"])

    # Duplicate state names
    with pytest.raises(InvalidResultShape):
        MultiStateResult(np.arange(5), pstate, ["a", "a"])

def test_invalid_shape_is_value_error():
    """Test that shape errors can be caught as ValueError"""
    with pytest.raises(ValueError):
        CurveSeries([1, 2], [0.1])

def test_validator_returns_true():
    """Test the validator on valid input"""
    validator = DataValidator()
    assert validator.validate_curve(np.array([1.0]), np.array([0.1]))
    assert validator.validate_multi_state(
        np.array([1.0, 2.0]),
        np.array([[0.5, 0.5], [0.4, 0.6]]),
        ["a", "b"],
        {"A": 1, "B": 1}
    )
