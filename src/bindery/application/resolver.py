from typing import Any, Hashable, Optional

from bindery.domain import ActivationError, Binding, DIException, IContainer, IResolver


class DependencyResolver(IResolver):
    """Builds instances from their bindings.

    Dependencies come from the binding's declared manifest; constructor
    signatures are never inspected.
    """

    def construct(
        self,
        binding: Binding,
        container: IContainer,
        request_context: Optional[Hashable] = None,
    ) -> Any:
        """Resolve the declared dependencies and call the implementation.

        Dependencies are resolved depth-first in declaration order and passed
        positionally.

        Args:
            binding: The binding to construct.
            container: The container to resolve dependencies from.
            request_context: Request boundary passed to nested resolutions.

        Returns:
            Instance with all dependencies injected.

        Raises:
            ActivationError: If the implementation raises a non-DI error.

        Example:
            >>> binding = Binding(
            ...     service_id=TYPES.USER_SERVICE,
            ...     implementation=UserService,
            ...     dependencies=(TYPES.USER_REPOSITORY, TYPES.EMAIL_SERVICE),
            ... )
            >>> service = DependencyResolver().construct(binding, container)
        """
        arguments = [container.resolve(dependency, request_context) for dependency in binding.dependencies]

        try:
            return binding.implementation(*arguments)
        except DIException:
            raise
        except Exception as e:
            raise ActivationError(binding.service_id, f"{type(e).__name__}: {e}") from e
