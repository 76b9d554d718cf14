import math
from fastapi import HTTPException
from kitchen_scaler.core.settings import settings


class YieldValidator:
    def __init__(self, max_yield: float = settings.max_yield):
        self.max_yield = max_yield

    def validate(self, original_yield: float, desired_yield: float):
        """
        Checks both yields before any scaling happens.
        Raises HTTPException(400) if either is unusable.
        """
        # 1. Must be real, positive numbers
        for label, value in (("Original", original_yield), ("Desired", desired_yield)):
            if value is None or math.isnan(value) or math.isinf(value) or value <= 0:
                raise HTTPException(
                    status_code=400,
                    detail={
                        "error_code": "INVALID_YIELD",
                        "message": f"{label} yield must be greater than 0, got {value}.",
                        "suggestion": "Enter the number of servings as a positive number."
                    }
                )

        # 2. Guard against typos like 40000 servings
        if original_yield > self.max_yield or desired_yield > self.max_yield:
            raise HTTPException(
                status_code=400,
                detail={
                    "error_code": "YIELD_LIMIT_EXCEEDED",
                    "message": (
                        f"Yield values seem unusually large ({original_yield} -> {desired_yield}); "
                        f"the maximum is {self.max_yield:g}."
                    ),
                    "suggestion": "Please check your servings input."
                }
            )

yield_validator = YieldValidator()
