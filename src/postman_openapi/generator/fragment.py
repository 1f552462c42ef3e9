"""The partial result of converting one collection node."""

from typing import Literal

from pydantic import BaseModel

from postman_openapi.generator.objects import Paths, SecuritySchemes


class Collision(BaseModel):
    """A merge that replaced something already present."""

    kind: Literal["operation", "security_scheme"]
    key: str  # path template or scheme name
    method: str | None = None

    def __str__(self) -> str:
        if self.kind == "operation":
            return f"{self.method.upper()} {self.key} defined more than once, keeping the last definition"
        return f"security scheme {self.key!r} redefined, keeping the last definition"


class Fragment(BaseModel):
    """Paths and security schemes contributed by a subtree."""

    paths: Paths = {}
    security_schemes: SecuritySchemes = {}
    collisions: list[Collision] = []

    def merge(self, other: "Fragment") -> list[Collision]:
        """Fold ``other`` into this fragment and return the new collisions.

        Operations merge per method: a method defined by ``other`` replaces
        the existing one, other methods of the same path are kept. Schemes
        with the same name are replaced.
        """
        found: list[Collision] = []

        for path, path_item in other.paths.items():
            target = self.paths.setdefault(path, {})
            for method, operation in path_item.items():
                if method in target:
                    found.append(Collision(kind="operation", key=path, method=method))
                target[method] = operation

        for name, scheme in other.security_schemes.items():
            existing = self.security_schemes.get(name)
            if existing is not None and existing != scheme:
                found.append(Collision(kind="security_scheme", key=name))
            self.security_schemes[name] = scheme

        self.collisions.extend(other.collisions)
        self.collisions.extend(found)
        return found
