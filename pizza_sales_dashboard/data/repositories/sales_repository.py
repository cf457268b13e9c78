"""
Sales repository for accessing pizza sales records.
"""
import math
from typing import Any, Dict, List, Optional
import pandas as pd
from pizza_sales_dashboard.data.repositories.base_repository import BaseRepository
from pizza_sales_dashboard.data.models.sales import SalesRecord
from pizza_sales_dashboard.data.connectors.base_connector import BaseConnector, DatasetLoadError
from pizza_sales_dashboard.config.dataset_config import FIELD_COLUMN_MAP, REQUIRED_FIELDS, SALES_COLUMNS
from pizza_sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


def _parse_quantity(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"invalid quantity: {value!r}")
    if isinstance(value, int):
        quantity = value
    else:
        text = str(value).strip()
        try:
            quantity = int(text)
        except ValueError:
            as_float = float(text)
            if not as_float.is_integer():
                raise ValueError(f"invalid quantity: {value!r}")
            quantity = int(as_float)
    if quantity < 0:
        raise ValueError(f"negative quantity: {value!r}")
    return quantity


def _parse_price(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"invalid price: {value!r}")
    price = float(str(value).strip()) if isinstance(value, str) else float(value)
    if math.isnan(price) or math.isinf(price) or price < 0:
        raise ValueError(f"invalid price: {value!r}")
    return price


def decode_record(raw: Any) -> SalesRecord:
    """
    Decode one JSON object into a SalesRecord.
    
    Args:
        raw (Any): One element of the dataset array
    
    Returns:
        SalesRecord: The typed record
    
    Raises:
        ValueError: If a field is missing or quantity/price are not valid numbers
    """
    if not isinstance(raw, dict):
        raise ValueError(f"record is not an object: {type(raw).__name__}")
    
    missing = [name for name in REQUIRED_FIELDS if raw.get(name) is None]
    if missing:
        raise ValueError(f"missing fields: {', '.join(missing)}")
    
    return SalesRecord(
        date=str(raw['date']),
        pizza_type_id=str(raw['pizza_type_id']),
        name=str(raw['name']),
        size=str(raw['size']),
        category=str(raw['category']),
        quantity=_parse_quantity(raw['quantity']),
        price=_parse_price(raw['price'])
    )


def records_to_dataframe(records: List[SalesRecord]) -> pd.DataFrame:
    """
    Convert sales records to the sales DataFrame layout.
    
    Args:
        records (List[SalesRecord]): Records in input order
    
    Returns:
        pd.DataFrame: One row per record with SALES_COLUMNS
    """
    rows = []
    for record in records:
        # SalesRecord attributes carry the JSON key names
        row = {column: getattr(record, field) for field, column in FIELD_COLUMN_MAP.items()}
        row['MONTH'] = record.month
        row['REVENUE'] = record.revenue
        rows.append(row)

    df = pd.DataFrame(rows, columns=SALES_COLUMNS)
    # Nullable integer keeps malformed months as <NA> instead of turning the column into floats
    df['MONTH'] = df['MONTH'].astype('Int64')
    df['QUANTITY'] = df['QUANTITY'].astype('int64')
    df['PRICE'] = df['PRICE'].astype('float64')
    df['REVENUE'] = df['REVENUE'].astype('float64')
    return df


class SalesRepository(BaseRepository[SalesRecord]):
    """
    Repository for the pizza sales dataset.
    
    The dataset is loaded once and cached; it is read-only afterwards.
    """
    
    def __init__(self, connector: BaseConnector):
        """
        Initialize the sales repository.
        
        Args:
            connector (BaseConnector): The dataset connector to use
        """
        super().__init__(connector)
        self._records: Optional[List[SalesRecord]] = None
        self._data: Optional[pd.DataFrame] = None
        self.rejected_count = 0
    
    def get_all(self) -> List[SalesRecord]:
        """
        Get all valid sales records.
        
        Returns:
            List[SalesRecord]: A list of SalesRecord objects in dataset order
        
        Raises:
            DatasetLoadError: If the dataset cannot be loaded or is not a JSON array
        """
        if self._records is None:
            self._records = self._decode_document(self._load_document())
        return list(self._records)
    
    def get_raw_data(self) -> pd.DataFrame:
        """
        Get the sales records as a pandas DataFrame.
        
        Returns:
            pd.DataFrame: The sales data; callers must not modify it in place
        """
        if self._data is None:
            self._data = records_to_dataframe(self.get_all())
        return self._data
    
    def _decode_document(self, document: Any) -> List[SalesRecord]:
        """
        Decode the dataset document, skipping records that fail validation.
        
        Args:
            document (Any): The parsed JSON document
        
        Returns:
            List[SalesRecord]: The valid records
        """
        if not isinstance(document, list):
            logger.error(f"Dataset document is a {type(document).__name__}, expected a list of records")
            raise DatasetLoadError("Dataset document is not a JSON array of records")
        
        records = []
        rejected = 0
        bad_dates = 0
        for index, raw in enumerate(document):
            try:
                record = decode_record(raw)
            except (ValueError, TypeError) as e:
                rejected += 1
                logger.warning(f"Skipping record {index}: {str(e)}")
                continue
            if record.month is None:
                bad_dates += 1
                logger.warning(f"Record {index} has a malformed date {record.date!r}; it will be excluded by every filter")
            records.append(record)
        
        self.rejected_count = rejected
        logger.info(f"Decoded {len(records)} sales records ({rejected} rejected, {bad_dates} with malformed dates).")
        return records
    
    def get_unique_months(self) -> List[int]:
        """
        Get the months present in the dataset.
        
        Returns:
            List[int]: Sorted month numbers
        """
        df = self.get_raw_data()
        return sorted(int(month) for month in df['MONTH'].dropna().unique())
    
    def get_unique_pizza_types(self) -> List[str]:
        """
        Get the pizza type ids present in the dataset.
        
        Returns:
            List[str]: Sorted pizza type ids
        """
        df = self.get_raw_data()
        return sorted(df['PIZZA_TYPE_ID'].unique().tolist())
    
    def get_pizza_type_names(self) -> Dict[str, str]:
        """
        Map pizza type ids to a display name.
        
        Returns:
            Dict[str, str]: pizza_type_id -> first name seen for it
        """
        df = self.get_raw_data()
        first_names = df.drop_duplicates('PIZZA_TYPE_ID')
        return dict(zip(first_names['PIZZA_TYPE_ID'], first_names['NAME']))
