"""Great Expectations context management.

Uses an ephemeral (in-memory) context so report validation needs no GE
project directory on disk.
"""

import great_expectations as gx
import pandas as pd

_DATASOURCE_NAME = "workforce_pandas"
_ASSET_NAME = "workforce_report"
_BATCH_DEFINITION_NAME = "whole_report"


def get_data_context():
    """Return a fresh ephemeral Great Expectations context."""
    return gx.get_context(mode="ephemeral")


def batch_for_dataframe(df: pd.DataFrame, context=None):
    """Register ``df`` as a whole-dataframe batch and return it for validation."""
    context = context or get_data_context()
    datasource = context.data_sources.add_pandas(name=_DATASOURCE_NAME)
    asset = datasource.add_dataframe_asset(name=_ASSET_NAME)
    batch_definition = asset.add_batch_definition_whole_dataframe(_BATCH_DEFINITION_NAME)
    return batch_definition.get_batch(batch_parameters={"dataframe": df})
