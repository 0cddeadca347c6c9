"""
Base classes for LLM providers

Defines the interface every script-writing backend implements.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from reelforge.config import LLMProviderType


@dataclass
class LLMConfig:
    """Configuration for an LLM request"""
    model: str
    temperature: float = 0.7
    max_tokens: Optional[int] = None
    system_instruction: Optional[str] = None

    # Provider-specific options
    extra_options: Dict[str, Any] = field(default_factory=dict)


@dataclass
class UsageStats:
    """Token usage statistics"""
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self):
        if self.total_tokens == 0:
            self.total_tokens = self.input_tokens + self.output_tokens


@dataclass
class LLMResponse:
    """Unified response from any LLM provider"""
    text: str
    model: str
    provider: LLMProviderType
    usage: Optional[UsageStats] = None
    raw_response: Any = None


class LLMProviderError(RuntimeError):
    """The provider answered with an error status or an unusable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LLMProvider(ABC):
    """Abstract base class for LLM providers"""

    provider_type: LLMProviderType

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate a response from the LLM

        Args:
            prompt: The user prompt
            config: LLM configuration options
            **kwargs: Additional provider-specific options

        Returns:
            LLMResponse with the generated text and metadata

        Raises:
            LLMProviderError: On an error answer from the provider
            httpx.HTTPError: On transport failures (HTTP-based providers)
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is properly configured"""

    @property
    def name(self) -> str:
        return self.provider_type.value
