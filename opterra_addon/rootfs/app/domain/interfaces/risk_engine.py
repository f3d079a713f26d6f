"""Risk engine interface.

Uniform contract shared by the tank, tankless and hybrid engines.
"""

from abc import ABC, abstractmethod

from domain.value_objects import ForensicInputs, OpterraMetrics, OpterraResult, Recommendation


class IRiskEngine(ABC):
    """Contract for a fuel-family risk engine.

    Every engine is a pure function of its input snapshot: identical
    inputs always produce identical metrics and verdicts, and no engine
    holds mutable state between calls.
    """

    @abstractmethod
    def calculate_health(self, inputs: ForensicInputs) -> OpterraMetrics:
        """Compute the metrics snapshot for an appliance.

        Args:
            inputs: Inspection snapshot

        Returns:
            Biological age, failure probability, health score and the
            stress breakdown with fuel-specific extensions
        """
        pass

    @abstractmethod
    def get_recommendation(
        self, metrics: OpterraMetrics, inputs: ForensicInputs
    ) -> Recommendation:
        """Derive the final verdict from metrics and inputs.

        The verdict has already been passed through the economic
        optimizer.

        Args:
            metrics: Metrics computed for the same inputs
            inputs: Inspection snapshot

        Returns:
            The recommended action
        """
        pass

    def assess(self, inputs: ForensicInputs) -> OpterraResult:
        """Compute metrics and verdict in one call.

        Args:
            inputs: Inspection snapshot

        Returns:
            Metrics with the verdict derived from them
        """
        metrics = self.calculate_health(inputs)
        return OpterraResult(metrics=metrics, verdict=self.get_recommendation(metrics, inputs))
