from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from investment_calculator.core.projection import calculate_investment_results
from investment_calculator.domain.storage import write_json_atomic
from investment_calculator.models import InvestmentInput, InvestmentResults, InvestmentScenario

logger = logging.getLogger(__name__)

_SCENARIO_LIST = TypeAdapter(List[InvestmentScenario])


class ScenarioNotFoundError(KeyError):
    def __init__(self, scenario_id: str):
        super().__init__(scenario_id)
        self.scenario_id = scenario_id

    def __str__(self) -> str:
        return f"no saved scenario with id '{self.scenario_id}'"


class ScenarioStoreError(RuntimeError):
    pass


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ScenarioStore:
    """
    Named input/result pairs kept in insertion order.

    With a path, the list is read by load() and written back after every
    mutation. Without one it lives in memory only.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else None
        self._scenarios: List[InvestmentScenario] = []

    def load(self) -> "ScenarioStore":
        if self.path is None or not self.path.exists():
            self._scenarios = []
            return self

        try:
            self._scenarios = _SCENARIO_LIST.validate_json(self.path.read_bytes())
        except (OSError, ValidationError) as exc:
            raise ScenarioStoreError(f"could not read scenarios from {self.path}: {exc}") from exc

        logger.info("loaded %d scenario(s) from %s", len(self._scenarios), self.path)
        return self

    def save(self) -> None:
        if self.path is None:
            return
        write_json_atomic(self.path, _SCENARIO_LIST.dump_python(self._scenarios, mode="json"))
        logger.info("saved %d scenario(s) to %s", len(self._scenarios), self.path)

    def __len__(self) -> int:
        return len(self._scenarios)

    def list_scenarios(self) -> List[InvestmentScenario]:
        return list(self._scenarios)

    def get_scenario(self, scenario_id: str) -> InvestmentScenario:
        for scenario in self._scenarios:
            if scenario.id == scenario_id:
                return scenario
        raise ScenarioNotFoundError(scenario_id)

    def save_scenario(
        self,
        name: str,
        input: InvestmentInput,
        results: Optional[InvestmentResults] = None,
    ) -> InvestmentScenario:
        name = name.strip()
        if not name:
            raise ValueError("scenario name must not be blank")

        if results is None:
            results = calculate_investment_results(input)

        stamp = _now()
        scenario = InvestmentScenario(
            id=uuid.uuid4().hex,
            name=name,
            input=input,
            results=results,
            createdAt=stamp,
            updatedAt=stamp,
        )
        self._scenarios.append(scenario)
        self.save()
        return scenario

    def update_scenario(
        self,
        scenario_id: str,
        input: InvestmentInput,
        name: Optional[str] = None,
    ) -> InvestmentScenario:
        """Recompute a saved scenario for new input, keeping its id and createdAt."""
        current = self.get_scenario(scenario_id)
        if name is not None and not name.strip():
            raise ValueError("scenario name must not be blank")

        updated = current.model_copy(
            update={
                "name": name.strip() if name is not None else current.name,
                "input": input,
                "results": calculate_investment_results(input),
                "updatedAt": _now(),
            }
        )
        self._scenarios = [updated if s.id == scenario_id else s for s in self._scenarios]
        self.save()
        return updated

    def load_scenario(self, scenario_id: str) -> InvestmentInput:
        return self.get_scenario(scenario_id).input

    def delete_scenario(self, scenario_id: str) -> None:
        self.get_scenario(scenario_id)
        self._scenarios = [s for s in self._scenarios if s.id != scenario_id]
        self.save()

    def clear_all_scenarios(self) -> None:
        self._scenarios = []
        self.save()
