# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-15
# Updated: 2026-01-16
# Description: MeetingVectorStore
# -----------------------------------------------------------------------------

from typing import Any, Dict, List, Optional, Protocol, Sequence, runtime_checkable

from vectorstore.IndexRecord import IndexRecord, VectorMatch

# Pass as `namespace` to search every project
ALL_NAMESPACES = None


@runtime_checkable
class MeetingVectorStore(Protocol):
    def test_connection(self) -> bool:
        ...

    def upsert(self, namespace: str, records: Sequence[IndexRecord]) -> int:
        ...

    def query(
            self,
            vector: Sequence[float],
            *,
            top_k: int = 5,
            namespace: Optional[str] = ALL_NAMESPACES,
            where: Dict[str, Any] | None = None,
    ) -> List[VectorMatch]:
        ...

    def count(self, namespace: Optional[str] = ALL_NAMESPACES) -> int:
        ...

    def delete_namespace(self, namespace: str) -> int:
        ...
