import logging

import pytest
from pyspark.sql import SparkSession

# Names of fixtures that require Spark to be available
_SPARK_FIXTURE_NAME = "spark_fixture"


@pytest.fixture(scope="session")
def spark_fixture():
    logging.getLogger("py4j").setLevel(logging.WARN)

    spark = (
        SparkSession.Builder()
        .appName("SQL fragment tests")
        # Tiny datasets, so one core and one shuffle partition is plenty.
        .master("local[1]")
        .config("spark.sql.shuffle.partitions", "1")
        .config("spark.default.parallelism", "1")
        .config("spark.driver.memory", "1g")
        .config("spark.ui.enabled", "false")
        .config("spark.ui.showConsoleProgress", "false")
        .getOrCreate()
    )

    yield spark

    spark.stop()


def pytest_addoption(parser: pytest.Parser):
    parser.addoption(
        "--include-spark-tests",
        action="store_true",
        default=False,
        help="Run tests that execute generated SQL on a local SparkSession.",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]):
    """Mark every test that asks for the Spark fixture with `requires_spark`."""
    for item in items:
        if _SPARK_FIXTURE_NAME in getattr(item, "fixturenames", ()):
            item.add_marker(pytest.mark.requires_spark)


def pytest_runtest_setup(item: pytest.Item):
    if item.config.getoption("--include-spark-tests"):
        return
    if list(item.iter_markers(name="requires_spark")):
        pytest.skip("Skipped tests that require a SparkSession")
