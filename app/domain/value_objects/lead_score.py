"""Lead score value object."""

from dataclasses import dataclass
from typing import Optional, Union

from app.domain.value_objects.choices import InvestmentCapacity


@dataclass(frozen=True)
class LeadScore:
    """Derived lead-quality indicator."""

    value: int

    INTEREST_WEIGHT = 10
    CAPACITY_YES_POINTS = 50
    CAPACITY_NO_POINTS = 10
    EXPERIENCE_BONUS = 10
    COMMENTS_BONUS = 5

    @classmethod
    def calculate(
        cls,
        interest_level: Optional[int],
        investment_capacity: Optional[Union[InvestmentCapacity, str]],
        previous_experience: Optional[str] = None,
        additional_comments: Optional[str] = None,
    ) -> "LeadScore":
        """
        Calculate the score of a lead.

        Absent inputs contribute nothing. No cap is applied to the sum.

        Args:
            interest_level: Interest level (1-5)
            investment_capacity: "yes" or "no"
            previous_experience: Free-text previous experience
            additional_comments: Free-text comments

        Returns:
            Computed score
        """
        score = 0

        if interest_level:
            score += int(interest_level) * cls.INTEREST_WEIGHT

        capacity = (
            investment_capacity.value
            if isinstance(investment_capacity, InvestmentCapacity)
            else investment_capacity
        )
        if capacity == InvestmentCapacity.YES.value:
            score += cls.CAPACITY_YES_POINTS
        elif capacity == InvestmentCapacity.NO.value:
            score += cls.CAPACITY_NO_POINTS

        if previous_experience:
            score += cls.EXPERIENCE_BONUS

        if additional_comments:
            score += cls.COMMENTS_BONUS

        return cls(score)

    def __int__(self) -> int:
        return self.value
