from preprocessing.datetime_derivation import derive_datetime
from preprocessing.missing_values import NA_VALUES, replace_missing
from preprocessing.numeric import to_numeric_columns
