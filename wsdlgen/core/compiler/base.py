"""
Argument compiler — turn a generator config into a process invocation.

The compiler is a pure function of the config: it resolves every
option once, runs the family's rule table in order and returns an
immutable argument vector. Compiling an unchanged config twice gives
identical results.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from wsdlgen.core.compiler.rules import Rule, Warn
from wsdlgen.core.models.axis import AxisConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Invocation:
    """Everything a process launcher needs to run a generator."""

    main_class: str
    classpath: tuple[str, ...]
    args: tuple[str, ...]

    def command(self, java: str = "java") -> list[str]:
        """Full command line for a JVM launcher."""
        cmd = [java]
        if self.classpath:
            cmd += ["-cp", os.pathsep.join(self.classpath)]
        return [*cmd, self.main_class, *self.args]

    def to_dict(self) -> dict[str, Any]:
        return {
            "main_class": self.main_class,
            "classpath": list(self.classpath),
            "args": list(self.args),
        }


@dataclass(frozen=True)
class ArgumentCompiler:
    """Ordered rule table for one generator family.

    Args:
        family: Generator family the table applies to ('axis1', 'axis2').
        main_class: Fully qualified main class of the generator.
        configuration_name: Classpath configuration holding the generator jars.
        rules: Rules in emission order.
    """

    family: str
    main_class: str
    configuration_name: str
    rules: tuple[Rule, ...]

    def compile(self, config: AxisConfig, warn: Warn | None = None) -> tuple[str, ...]:
        """Compile ``config`` into the generator's argument vector.

        Non-fatal conflicts are reported through ``warn``; by default
        they are logged as warnings.
        """
        if config.family != self.family:
            raise TypeError(
                f"{self.family} compiler cannot compile {config.family} config '{config.name}'"
            )

        values = config.resolve()
        report = warn or logger.warning
        args: list[str] = []
        for rule in self.rules:
            args.extend(rule.emit(values, report))

        logger.debug("Compiled %d arguments for %s", len(args), config.task_name)
        return tuple(args)

    def invocation(
        self,
        config: AxisConfig,
        classpath: Iterable[Path | str] = (),
        warn: Warn | None = None,
    ) -> Invocation:
        return Invocation(
            main_class=self.main_class,
            classpath=tuple(str(entry) for entry in classpath),
            args=self.compile(config, warn),
        )
