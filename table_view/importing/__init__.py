from .dataframe import columns_from_dataframe, records_from_dataframe

__all__ = ["columns_from_dataframe", "records_from_dataframe"]
