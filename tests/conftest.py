"""Test configuration and fixtures."""
import csv
import pytest
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

@pytest.fixture
def sample_rows():
    """Sample name-list records."""
    return [
        {"id": "1", "Name": "ひらがな", "City": "London"},
        {"id": "2", "Name": "カタカナ", "City": "New York"},
        {"id": "3", "Name": "", "City": "Greenfield"},
        {"id": "4", "Name": "きょうは　いい　てんき。", "City": "Hotel"},
    ]

@pytest.fixture
def sample_csv(tmp_path, sample_rows):
    """Write sample_rows to a CSV file and return its path."""
    path = tmp_path / "input.csv"
    with open(path, 'w', encoding='utf-8', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=["id", "Name", "City"])
        writer.writeheader()
        writer.writerows(sample_rows)
    return path

def read_csv(path):
    """Return (fieldnames, rows) of a CSV file."""
    with open(path, 'r', encoding='utf-8', newline='') as csvfile:
        reader = csv.DictReader(csvfile)
        return list(reader.fieldnames), list(reader)

@pytest.fixture
def csv_reader():
    return read_csv
