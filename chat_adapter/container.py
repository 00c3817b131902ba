import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Registration:
    factory: Callable[[], Any]
    singleton: bool = False


@dataclass
class Container:
    _registrations: dict[type, Registration] = field(default_factory=dict)
    _instances: dict[type, Any] = field(default_factory=dict)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface.

        Args:
            interface: Interface type.
            factory: Factory function.
            singleton: Whether to cache instance.
        """
        self._registrations[interface] = Registration(factory, singleton)
        self._instances.pop(interface, None)

    def resolve(self, interface: type[T]) -> T:
        if interface in self._instances:
            return self._instances[interface]

        registration = self._registrations.get(interface)
        if registration is None:
            raise KeyError(f"No factory registered for {interface}")

        instance = registration.factory()
        if registration.singleton:
            self._instances[interface] = instance
        return instance

    async def aclose(self) -> None:
        """Close cached instances that hold connections, then forget them."""
        instances, self._instances = self._instances, {}
        for interface, instance in instances.items():
            close = getattr(instance, "close", None)
            if close is not None:
                logger.debug(f"Closing {interface.__name__}")
                await close()


container = Container()



def configure_container(settings: Settings, target: Container | None = None) -> Container:
    """Configure container with all dependencies.

    Args:
        settings: Application settings.
        target: Container to configure (defaults to the global one).

    Returns:
        Configured container.
    """
    from .core.protocols.llm import LLMProtocol
    from .core.services.chat_service import ChatService
    from .infrastructure.llm.ollama_client import OllamaClient

    target = target if target is not None else container

    target.register(
        LLMProtocol,
        lambda: OllamaClient(
            base_url=settings.ollama_base_url,
            model=settings.llm_model,
        ),
        singleton=True,
    )

    target.register(
        ChatService,
        lambda: ChatService(
            llm=target.resolve(LLMProtocol),
            system_prompt=settings.system_prompt,
        ),
        singleton=True,
    )

    logger.info(f"Container configured: model={settings.llm_model}")
    return target
