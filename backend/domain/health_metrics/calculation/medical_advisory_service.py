"""MedicalAdvisoryService - dietary advice for medical conditions."""

import logging
from typing import List, Optional, Sequence, Tuple

from ..core.ports.calculators import IMedicalAdvisor
from ..core.reference_data import AdvisoryGroup, ReferenceData

logger = logging.getLogger("domain.health_metrics.advisory")


class MedicalAdvisoryService(IMedicalAdvisor):
    """Match free-text medical conditions against known keyword groups.

    Groups, in priority order:
        diabetes      "diabetes"
        hypertension  "hypertension", "high blood pressure"
        cholesterol   "cholesterol"

    Each condition matches at most one group (the first one, in the order
    above). Advisories are emitted group by group, once per matching
    condition, so two diabetes entries yield the diabetes advice twice.
    With ``deduplicate=True`` every matched group is emitted once.
    """

    def __init__(
        self,
        reference_data: Optional[ReferenceData] = None,
        deduplicate: bool = False,
    ) -> None:
        self._reference_data = reference_data or ReferenceData()
        self._deduplicate = deduplicate

    def _match_group(self, condition: str) -> Optional[AdvisoryGroup]:
        for group in self._reference_data.advisory_groups:
            if group.matches(condition):
                return group
        return None

    def match(self, conditions: Sequence[str]) -> Tuple[str, ...]:
        """Collect advisories for the given conditions.

        Example:
            >>> MedicalAdvisoryService().match(["High Blood Pressure"])
            ('Reduce sodium intake', 'Increase potassium-rich foods', 'Follow DASH diet principles')
        """
        matched = [self._match_group(condition) for condition in conditions]

        advisories: List[str] = []
        for group in self._reference_data.advisory_groups:
            hits = sum(1 for candidate in matched if candidate is group)
            if hits and self._deduplicate:
                hits = 1
            for _ in range(hits):
                advisories.extend(group.advisories)

        if conditions:
            logger.debug(
                "Medical conditions matched",
                extra={
                    "conditions": len(conditions),
                    "matched": sum(1 for candidate in matched if candidate is not None),
                },
            )
        return tuple(advisories)
