from abc import ABC, abstractmethod

from formgrid.domain.schemas.input_data import InputData
from formgrid.domain.schemas.result_data import ResultData


class Pipeline_interface(ABC):
    @abstractmethod
    def run(self, input_data: InputData) -> ResultData:
        """Decode the document and return the first page that matches the layout.

        Raises NoValidPageError (with the last page's result) when none does.
        """
        pass
