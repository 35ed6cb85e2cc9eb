"""
Per-provider tier selection and cost computation.

Each provider has two PURE FUNCTIONS:
- select_<provider>_tier(estimate) -> tier name
- price_<provider>(estimate) -> CloudPricing

They are independent of each other and can run in any order. PROVIDERS at
the bottom lists them in the order the engine evaluates them, which is
also the tie-break order after sorting by cost.
"""

from __future__ import annotations

from collections.abc import Callable

from infra_estimator.pricing.tables import (
    AWS_OTHER_MONTHLY,
    AWS_RDS_EXTRA_PER_GB,
    AWS_RDS_INCLUDED_GB,
    AWS_TIERS,
    HOURS_PER_MONTH,
    RAILWAY_DB_BASE,
    RAILWAY_DB_MINIMUM,
    RAILWAY_DB_PER_GB,
    RAILWAY_MIN_RAM_GB,
    RAILWAY_TIERS,
    RAILWAY_USERS_PER_RAM_GB,
    RAILWAY_VOLUME_PER_GB,
    RENDER_DB_PER_GB,
    RENDER_DISK_PER_GB,
    RENDER_TIERS,
    SUPABASE_TIERS,
    VERCEL_EXTERNAL_DB_COST,
    VERCEL_EXTERNAL_DB_THRESHOLD_GB,
    VERCEL_OBJECT_STORAGE_PER_GB,
    VERCEL_TIERS,
)
from infra_estimator.core.rounding import round2
from infra_estimator.schemas.estimate import EstimateResult
from infra_estimator.schemas.pricing import CloudPricing, CostBreakdown


def _r2(value: float) -> float:
    return round2(value)


def _pricing(
    provider: str,
    name: str,
    tier: str,
    compute: float,
    database: float,
    storage: float,
    bandwidth: float,
    other: float,
    notes: list[str],
    total: float | None = None,
) -> CloudPricing:
    if total is None:
        total = compute + database + storage + bandwidth + other
    return CloudPricing(
        provider=provider,
        name=name,
        tier=tier,
        monthly_total=_r2(total),
        breakdown=CostBreakdown(
            compute=_r2(compute),
            database=_r2(database),
            storage=_r2(storage),
            bandwidth=_r2(bandwidth),
            other=_r2(other),
        ),
        notes=notes,
    )


# ---------------------------------------------------------------------------
# VERCEL
# ---------------------------------------------------------------------------


def select_vercel_tier(estimate: EstimateResult) -> str:
    monthly = estimate.requests.monthly_total
    bandwidth = estimate.bandwidth.monthly_gb
    if monthly > 10_000_000 or bandwidth > 1000:
        return "enterprise"
    if monthly > 100_000 or bandwidth > 100:
        return "pro"
    return "hobby"


def price_vercel(estimate: EstimateResult) -> CloudPricing:
    """Serverless frontend; database and object storage are bought elsewhere."""
    tier = select_vercel_tier(estimate)
    rates = VERCEL_TIERS[tier]
    storage = estimate.storage

    compute = rates["base"]
    functions = estimate.requests.monthly_total / 1_000_000 * rates["functions_per_million"]
    excess_gb = max(0.0, estimate.bandwidth.monthly_gb - rates["limit_gb"])
    egress = excess_gb * rates["bandwidth_per_gb"]

    database = VERCEL_EXTERNAL_DB_COST if storage.database_gb > VERCEL_EXTERNAL_DB_THRESHOLD_GB else 0
    media = storage.media_storage_gb * VERCEL_OBJECT_STORAGE_PER_GB

    notes = []
    if tier == "hobby":
        notes.append("Free tier - limited to personal, non-commercial projects")
    notes.append("Database not included (use Supabase, Neon or PlanetScale)")
    if storage.media_storage_gb > 0:
        notes.append("Media storage via Cloudflare R2 or S3")

    # invocations are billed with traffic, so they land in the bandwidth column
    return _pricing(
        "vercel", "Vercel", tier,
        compute=compute,
        database=database,
        storage=media,
        bandwidth=functions + egress,
        other=0,
        notes=notes,
    )


# ---------------------------------------------------------------------------
# RAILWAY
# ---------------------------------------------------------------------------


def select_railway_tier(estimate: EstimateResult) -> str:
    return "pro" if estimate.requests.avg_per_second > 10 else "hobby"


def price_railway(estimate: EstimateResult) -> CloudPricing:
    """Usage-billed containers: RAM-hours sized from concurrent users."""
    tier = select_railway_tier(estimate)
    rates = RAILWAY_TIERS[tier]
    storage = estimate.storage

    ram_gb = max(RAILWAY_MIN_RAM_GB, estimate.users.concurrent_peak / RAILWAY_USERS_PER_RAM_GB)
    compute = rates["base"] + ram_gb * HOURS_PER_MONTH * rates["ram_per_gb_hour"]
    bandwidth = estimate.bandwidth.monthly_gb * rates["egress_per_gb"]

    if storage.database_gb > 1:
        database = RAILWAY_DB_BASE + storage.database_gb * RAILWAY_DB_PER_GB
    else:
        database = RAILWAY_DB_MINIMUM

    volume = storage.media_storage_gb * RAILWAY_VOLUME_PER_GB

    return _pricing(
        "railway", "Railway", tier,
        compute=compute,
        database=database,
        storage=volume,
        bandwidth=bandwidth,
        other=0,
        notes=[
            "PostgreSQL included as an add-on",
            "Usage-based pricing (RAM + CPU)",
            "Good fit for MVPs and smaller projects",
        ],
    )


# ---------------------------------------------------------------------------
# SUPABASE
# ---------------------------------------------------------------------------


def select_supabase_tier(estimate: EstimateResult) -> str:
    db = estimate.storage.database_gb
    bandwidth = estimate.bandwidth.monthly_gb
    if db > 8 or bandwidth > 250:
        return "team"
    if db > 0.5 or bandwidth > 2:
        return "pro"
    return "free"


def price_supabase(estimate: EstimateResult) -> CloudPricing:
    """
    Managed backend: flat plan fee plus overage past the included quotas.

    Supabase does not bill compute and database separately, so the plan fee
    is reported as 40/40 between them and overage split evenly between
    storage and bandwidth. Only monthly_total is exact.
    """
    tier = select_supabase_tier(estimate)
    rates = SUPABASE_TIERS[tier]
    base = rates["base"]

    total = base
    if tier != "free":
        extra_db = max(0.0, estimate.storage.database_gb - rates["db_gb"])
        extra_storage = max(0.0, estimate.storage.media_storage_gb - rates["storage_gb"])
        extra_bandwidth = max(0.0, estimate.bandwidth.monthly_gb - rates["bandwidth_gb"])

        total += extra_db * rates["extra_db_per_gb"]
        total += extra_storage * rates["extra_storage_per_gb"]
        total += extra_bandwidth * rates["extra_bandwidth_per_gb"]

    overage = total - base

    return _pricing(
        "supabase", "Supabase", tier,
        compute=base * 0.4,
        database=base * 0.4,
        storage=overage * 0.5,
        bandwidth=overage * 0.5,
        other=0,
        total=total,
        notes=[
            "All-in-one: Auth, Database, Storage, Realtime",
            "Great for MVPs and startups",
            "Free tier limits may force an early upgrade" if tier == "free" else "Includes daily backups",
        ],
    )


# ---------------------------------------------------------------------------
# RENDER
# ---------------------------------------------------------------------------


def select_render_tier(estimate: EstimateResult) -> str:
    return "standard" if estimate.requests.avg_per_second > 5 else "starter"


def price_render(estimate: EstimateResult) -> CloudPricing:
    tier = select_render_tier(estimate)
    rates = RENDER_TIERS[tier]
    storage = estimate.storage

    compute = rates["service_base"]
    database = rates["db_base"]
    if storage.database_gb > 1:
        database += storage.database_gb * RENDER_DB_PER_GB

    excess_gb = max(0.0, estimate.bandwidth.monthly_gb - rates["free_bandwidth_gb"])
    bandwidth = excess_gb * rates["bandwidth_per_gb"]
    disk = storage.media_storage_gb * RENDER_DISK_PER_GB

    return _pricing(
        "render", "Render", tier,
        compute=compute,
        database=database,
        storage=disk,
        bandwidth=bandwidth,
        other=0,
        notes=[
            "Simple setup, good developer experience",
            "Managed PostgreSQL included",
            "Autoscaling available on paid tiers",
        ],
    )


# ---------------------------------------------------------------------------
# AWS
# ---------------------------------------------------------------------------


def select_aws_tier(estimate: EstimateResult) -> str:
    rps = estimate.requests.avg_per_second
    concurrent = estimate.users.concurrent_peak
    if rps > 50 or concurrent > 2000:
        return "large"
    if rps > 10 or concurrent > 500:
        return "medium"
    return "small"


def price_aws(estimate: EstimateResult) -> CloudPricing:
    """Self-managed EC2 + RDS + S3 + CloudFront."""
    tier = select_aws_tier(estimate)
    rates = AWS_TIERS[tier]
    storage = estimate.storage

    compute = rates["ec2"]
    database = rates["rds"]
    if storage.database_gb > AWS_RDS_INCLUDED_GB:
        database += (storage.database_gb - AWS_RDS_INCLUDED_GB) * AWS_RDS_EXTRA_PER_GB

    return _pricing(
        "aws", "AWS (DIY)", tier,
        compute=compute,
        database=database,
        storage=storage.media_storage_gb * rates["s3_per_gb"],
        bandwidth=estimate.bandwidth.monthly_gb * rates["cf_per_gb"],
        other=AWS_OTHER_MONTHLY,
        notes=[
            "Maximum flexibility and control",
            "Requires more DevOps knowledge",
            "Free tier available for new accounts (12 months)",
            "Consider AWS Amplify to simplify setup",
        ],
    )


# ---------------------------------------------------------------------------
# REGISTRY
# ---------------------------------------------------------------------------

ProviderPricer = Callable[[EstimateResult], CloudPricing]

PROVIDERS: tuple[tuple[str, ProviderPricer], ...] = (
    ("vercel", price_vercel),
    ("railway", price_railway),
    ("supabase", price_supabase),
    ("render", price_render),
    ("aws", price_aws),
)
