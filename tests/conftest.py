import pytest

from controllers.csv_controller import CSVContext, CSVController
from models.csv_model import CSVData


@pytest.fixture
def sample_csv(tmp_path):
    """Archivo de 2 filas x 3 campos, sin salto de línea final."""
    path = tmp_path / "testdata.csv"
    path.write_text("a,b,c\nd,e,f", encoding="utf-8")
    return path


@pytest.fixture
def table():
    return CSVData(rows=[["a", "b", "c"], ["d", "e", "f"], ["g", "h", "i"]])


@pytest.fixture
def controller(tmp_path):
    return CSVController(output_path=str(tmp_path / "output.csv"))


@pytest.fixture
def ctx():
    return CSVContext()
