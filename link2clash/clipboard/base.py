"""
Clipboard Strategy Base Interface
=================================
Abstract base class for clipboard write mechanisms.
"""

from abc import ABC, abstractmethod


class ClipboardStrategy(ABC):
    """
    Abstract base class for clipboard strategies.
    
    Implementations:
        - SystemClipboard: OS clipboard via pyperclip
        - TerminalClipboard: OSC 52 through the running Textual app
    """
    
    @property
    @abstractmethod
    def name(self) -> str:
        """
        Strategy name identifier.
        
        Returns:
            Short name like 'system', 'terminal'
        """
        pass
    
    @abstractmethod
    async def write(self, text: str) -> None:
        """
        Place text on the clipboard.
        
        Args:
            text: Text to copy
            
        Raises:
            ClipboardError: If the mechanism is unavailable or the write fails
        """
        pass
