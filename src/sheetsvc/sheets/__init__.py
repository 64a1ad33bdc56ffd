"""
Classes to facilitate working with Google Sheets values
"""

from .resources import (GoogleSheetsEnum, ValueInputOption, InsertDataOption, WriteOptions,
                        ValueRange, UpdateValuesResponse, AppendValuesResponse, ClearValuesResponse)
from .client import SpreadsheetClient, Row, ValueGrid
