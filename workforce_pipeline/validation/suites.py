"""Expectation suite definitions for pipeline outputs.

Each entry names a Great Expectations expectation class and its keyword
arguments; the runner resolves the class from ``gx.expectations``.
"""

type ExpectationConfig = dict[str, str | dict]
type SuiteConfig = list[ExpectationConfig]
type DomainName = str


_DOMAIN_SUITES: dict[DomainName, SuiteConfig] = {
    "workforce": [
        {
            "expectation_type": "ExpectColumnToExist",
            "kwargs": {"column": "department_name"},
        },
        {
            "expectation_type": "ExpectColumnValuesToNotBeNull",
            "kwargs": {"column": "department_name"},
        },
        {
            "expectation_type": "ExpectColumnValuesToBeBetween",
            "kwargs": {"column": "turnover_rate", "min_value": 0, "max_value": 1},
        },
        {
            "expectation_type": "ExpectColumnValuesToBeInSet",
            "kwargs": {"column": "salary_quartile", "value_set": [1, 2, 3, 4]},
        },
        {
            "expectation_type": "ExpectColumnValuesToBeBetween",
            "kwargs": {"column": "max_salary_percentile", "min_value": 0, "max_value": 1},
        },
        {
            "expectation_type": "ExpectColumnValuesToBeBetween",
            "kwargs": {"column": "max_salary_cume_dist", "min_value": 0, "max_value": 1},
        },
        {
            "expectation_type": "ExpectColumnValuesToBeBetween",
            "kwargs": {"column": "department_performance_rank", "min_value": 1},
        },
    ],
}


def build_suite_for_domain(domain: DomainName) -> SuiteConfig:
    """Return the expectation suite for a domain, or a sensible default."""
    if domain in _DOMAIN_SUITES:
        return _DOMAIN_SUITES[domain]

    # Default suite: just check that the dataframe is not empty
    return [
        {
            "expectation_type": "ExpectTableRowCountToBeBetween",
            "kwargs": {"min_value": 1},
        },
    ]
