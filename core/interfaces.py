"""Abstract base classes for Amalgam components"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

InputT = TypeVar("InputT")
OutputT = TypeVar("OutputT")


class Stage(ABC, Generic[InputT, OutputT]):
    """Abstract base class for all pipeline stages"""
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable stage name"""
        pass
    
    @property
    @abstractmethod
    def stage_number(self) -> int:
        """Stage number (0-3)"""
        pass
    
    @abstractmethod
    async def execute(self, input_data: InputT) -> OutputT:
        """Execute the stage"""
        pass
    
    @abstractmethod
    def validate_input(self, input_data: InputT) -> bool:
        """Validate input before processing"""
        pass


class FileParser(ABC):
    """Abstract base class for file parsers"""
    
    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """List of supported file extensions"""
        pass
    
    @abstractmethod
    def parse(self, source: "SourceFile") -> list["ParseResult"]:
        """Parse a source file into zero or more ParseResults"""
        pass
