"""Recursive walk over the collection tree.

Folders contribute to the tag of the requests below them; requests become
operations. Each child's fragment is folded into its parent's, so the
result of walking the root is the whole path table and scheme registry.
"""

import logging
from collections.abc import Sequence

from postman_openapi.config import ConvertOptions
from postman_openapi.generator.fragment import Collision, Fragment
from postman_openapi.generator.operation import build_operation
from postman_openapi.parser.base import CollectionNode, Item, ItemGroup, UnknownNode

logger = logging.getLogger(__name__)


def report_collision(collision: Collision, options: ConvertOptions) -> None:
    level = logging.WARNING if options.strict else logging.DEBUG
    logger.log(level, "%s", collision)


def walk(
    node: CollectionNode,
    options: ConvertOptions | None = None,
    tags: Sequence[str] = (),
    path_prefix: str = "",
) -> Fragment:
    """Convert ``node`` and everything below it into a :class:`Fragment`."""
    options = options or ConvertOptions()

    if isinstance(node, ItemGroup):
        child_tags = (*tags, node.name) if node.name else tuple(tags)
        child_prefix = f"{path_prefix}/{node.name or ''}"
        result = Fragment()
        for child in node.item:
            for collision in result.merge(walk(child, options, child_tags, child_prefix)):
                report_collision(collision, options)
        return result

    if isinstance(node, Item):
        logger.debug("Converting request %r under %s", node.name, path_prefix or "/")
        return build_operation(node, tags, options)

    if isinstance(node, UnknownNode):
        logger.debug("Skipping node under %s: neither a folder nor a request", path_prefix or "/")
    return Fragment()
