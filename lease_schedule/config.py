"""Configuration management for lease-schedule."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from lease_schedule.exceptions import ConfigurationError


@dataclass
class PostgresConfig:
    """PostgreSQL connection configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "leases"
    user: str = "postgres"
    password: str = "postgres"

    @property
    def connection_string(self) -> str:
        """Get connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class ScheduleConfig:
    """Presentation and persistence options for payment schedules."""

    currency_symbol: str = "₱"
    skip_existing: bool = True


@dataclass
class PortfolioConfig:
    """Configuration for synthetic lease portfolio generation."""

    num_leases: int = 100
    utility_rate: float = 0.3
    start_date: date | None = None
    end_date: date | None = None


@dataclass
class LeaseScheduleConfig:
    """Main configuration for lease-schedule."""

    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"  # standard or json

    @classmethod
    def from_env(cls) -> "LeaseScheduleConfig":
        """Create config from environment variables."""
        import os

        postgres = PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=_int_env("POSTGRES_PORT", "5432"),
            database=os.getenv("POSTGRES_DB", "leases"),
            user=os.getenv("POSTGRES_USER", "postgres"),
            password=os.getenv("POSTGRES_PASSWORD", "postgres"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        schedule = ScheduleConfig(
            currency_symbol=os.getenv("CURRENCY_SYMBOL", "₱"),
            skip_existing=os.getenv("SKIP_EXISTING", "true").lower() == "true",
        )

        return cls(
            postgres=postgres,
            output=output,
            schedule=schedule,
            seed=_int_env("SEED") if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _int_env(name: str, default: str | None = None) -> int:
    """Read an integer environment variable."""
    import os

    raw = os.getenv(name, default)
    try:
        return int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
