"""
Base use case class.

Each use case encapsulates a single pipeline operation and knows nothing about
HTTP: it takes a request model, returns a response model, and raises
``PipelineError`` subclasses that the routes render into the envelope.

Example:
    >>> class ScriptGenerationUseCase(UseCase[ScriptGenerationRequest, ScriptGenerationResponse]):
    ...     async def execute(self, request):
    ...         ...

    >>> response = await ScriptGenerationUseCase().execute(request)
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic

RequestT = TypeVar("RequestT")
ResponseT = TypeVar("ResponseT")


class UseCase(ABC, Generic[RequestT, ResponseT]):
    """
    Base use case abstract class.

    Type Parameters:
        RequestT: Type of the input request object
        ResponseT: Type of the output response object
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        """
        Execute the use case and return a response.

        Raises:
            PipelineError subclasses (ValidationError, UpstreamConfigError,
            UpstreamCallError, ParseError). HTTP exceptions are never raised
            here; converting errors to responses is the route's job.
        """
