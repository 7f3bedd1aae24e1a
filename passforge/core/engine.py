"""
PassForge Engine
=================

Facade over the generators, the strength analyzer and the breach checker.
:class:`ForgeEngine` applies configuration defaults, injects one charset
registry and random source into every call, and logs each operation.

Logged fields are limited to lengths, strategies and counts; generated or
analysed passwords are never written to a log record.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from shared.config import ForgeConfig
from shared.logger import ForgeLogger

from passforge.analyzers.strength import StrengthAnalyzer
from passforge.collectors.breach import BreachChecker, BreachLookup, PwnedRangeClient
from passforge.core.charsets import CharsetRegistry, default_registry
from passforge.core.exceptions import InvalidConfiguration
from passforge.core.models import (
    AnalysisResult,
    BatchResult,
    BreachResult,
    GenerationOptions,
    PassphraseOptions,
    PersonalOptions,
    Strategy,
)
from passforge.core.random_source import RandomSource, default_source
from passforge.generators.batch import generate_batch
from passforge.generators.dispatch import generate, select_strategy
from passforge.generators.passphrase import (
    generate_passphrase,
    passphrase_crack_time,
    passphrase_entropy,
)
from passforge.generators.pattern import generate_from_pattern
from passforge.generators.personal import personalize
from passforge.generators.pronounceable import generate_pronounceable

_M = TypeVar("_M", bound=BaseModel)


def _build(model: type[_M], values: dict[str, Any]) -> _M:
    try:
        return model(**values)
    except ValidationError as exc:
        raise InvalidConfiguration(f"invalid {model.__name__}: {exc}") from exc


class ForgeEngine:
    """Orchestrates generation, analysis and breach checks.

    Usage::

        engine = ForgeEngine()
        pw = engine.generate(length=20, use_symbols=True)
        result = engine.analyze(pw)
        breach = await engine.check_breach(pw)

    Attributes:
        config: Loaded configuration.
        registry: Character classes and word corpus shared by all calls.
        rng: Random source shared by all calls.
        logger: Structured logger for the engine.
    """

    def __init__(
        self,
        config: Optional[ForgeConfig] = None,
        *,
        registry: Optional[CharsetRegistry] = None,
        rng: Optional[RandomSource] = None,
        breach_lookup: Optional[BreachLookup] = None,
        logger: Optional[ForgeLogger] = None,
    ) -> None:
        self.config = config or ForgeConfig()
        self.registry = registry or default_registry()
        self.rng = rng or default_source()
        self.logger = logger or ForgeLogger.from_config(
            "engine", self.config.global_settings
        )

        self._analyzer = StrengthAnalyzer(self.config.analyzer.guesses_per_second)
        self._breach_checker = BreachChecker(
            breach_lookup or PwnedRangeClient(self.config.breach)
        )

    # ------------------------------------------------------------------ #
    #  Option builders (config defaults + caller overrides)
    # ------------------------------------------------------------------ #

    def generation_options(self, **overrides: Any) -> GenerationOptions:
        gen = self.config.generator
        values: dict[str, Any] = {
            "length": gen.default_length,
            "use_upper": gen.use_upper,
            "use_lower": gen.use_lower,
            "use_digits": gen.use_digits,
            "use_symbols": gen.use_symbols,
            "mix": gen.mix_keywords,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return _build(GenerationOptions, values)

    def passphrase_options(self, **overrides: Any) -> PassphraseOptions:
        phrase = self.config.passphrase
        values: dict[str, Any] = {
            "word_count": phrase.word_count,
            "separator": phrase.separator,
            "capitalize": phrase.capitalize,
            "append_number": phrase.append_number,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return _build(PassphraseOptions, values)

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate(self, options: Optional[GenerationOptions] = None, **overrides: Any) -> str:
        """Generate one password; *overrides* patch the config defaults."""
        if options is None and overrides.get("strategy") == Strategy.PASSPHRASE:
            # word count and separator live in the passphrase config section
            overrides.pop("strategy")
            return self.generate_passphrase(**overrides)
        options = options or self.generation_options(**overrides)
        strategy = select_strategy(options)
        with self.logger.operation("generate"):
            password = generate(options, registry=self.registry, rng=self.rng)
            self.logger.info(
                "Generated password", strategy=strategy.value, length=len(password)
            )
        return password

    def generate_from_pattern(self, pattern: Optional[str] = None) -> str:
        template = pattern if pattern is not None else self.config.generator.default_pattern
        with self.logger.operation("pattern"):
            password = generate_from_pattern(template, registry=self.registry, rng=self.rng)
            self.logger.info("Generated pattern password", length=len(password))
        return password

    def generate_pronounceable(
        self, options: Optional[GenerationOptions] = None, **overrides: Any
    ) -> str:
        if options is None:
            if overrides.get("length") is None:
                overrides["length"] = self.config.generator.pronounceable_length
            options = self.generation_options(**overrides)
        with self.logger.operation("pronounceable"):
            password = generate_pronounceable(options, registry=self.registry, rng=self.rng)
            self.logger.info("Generated pronounceable password", length=len(password))
        return password

    def generate_passphrase(
        self, options: Optional[PassphraseOptions] = None, **overrides: Any
    ) -> str:
        options = options or self.passphrase_options(**overrides)
        with self.logger.operation("passphrase"):
            phrase = generate_passphrase(options, registry=self.registry, rng=self.rng)
            self.logger.info("Generated passphrase", words=options.word_count)
        return phrase

    def passphrase_estimate(self, word_count: Optional[int] = None) -> tuple[float, str]:
        """Return ``(entropy_bits, crack_time)`` for a passphrase size."""
        words = word_count if word_count is not None else self.config.passphrase.word_count
        corpus = self.registry.corpus
        return (
            passphrase_entropy(words, corpus),
            passphrase_crack_time(
                words, corpus, self.config.analyzer.guesses_per_second
            ),
        )

    def personalize(
        self,
        keywords: Sequence[str],
        options: Optional[PersonalOptions] = None,
        **overrides: Any,
    ) -> str:
        options = options or _build(
            PersonalOptions, {k: v for k, v in overrides.items() if v is not None}
        )
        with self.logger.operation("personal"):
            password = personalize(keywords, options, registry=self.registry, rng=self.rng)
            self.logger.info("Personalized password", keyword_count=len(keywords))
        return password

    def batch(self, count: int, kind: Strategy | str = Strategy.RANDOM, **options: Any) -> BatchResult:
        """Generate *count* passwords, bounded by ``global.batch_limit``."""
        options = self._batch_options(kind, options)
        with self.logger.timed(f"batch of {count}"):
            result = generate_batch(
                count,
                kind,
                registry=self.registry,
                rng=self.rng,
                limit=self.config.global_settings.batch_limit,
                **options,
            )
        self.logger.info("Generated batch", kind=result.kind.value, count=result.count)
        return result

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    def analyze(self, password: Optional[str]) -> AnalysisResult:
        with self.logger.operation("analyze"):
            result = self._analyzer.analyze(password)
            self.logger.info(
                "Analysed password",
                length=len(result.password),
                strength=result.strength.value,
                score=result.score,
            )
        return result

    async def check_breach(self, password: Optional[str]) -> BreachResult:
        """Query the breach lookup; unreachable services yield an
        indeterminate result instead of an error."""
        with self.logger.operation("breach"):
            result = await self._breach_checker.check(password)
            self.logger.info("Breach lookup finished", status=result.status.value)
        return result

    def _batch_options(self, kind: Strategy | str, options: dict[str, Any]) -> dict[str, Any]:
        # Strategy is a str enum, so both spellings of *kind* compare equal
        if kind == Strategy.PRONOUNCEABLE and options.get("length") is None:
            options["length"] = self.config.generator.pronounceable_length
        if kind in (Strategy.RANDOM, Strategy.PRONOUNCEABLE):
            return self.generation_options(**options).model_dump(
                exclude={"strategy", "pattern"}
            )
        if kind == Strategy.PASSPHRASE:
            return self.passphrase_options(**options).model_dump()
        if kind == Strategy.PATTERN and options.get("pattern") is None:
            options["pattern"] = self.config.generator.default_pattern
        return options
