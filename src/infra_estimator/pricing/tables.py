"""
Provider pricing tables.

Approximate public list prices (2024 snapshot). These are reference
values, not quotes; refresh them when providers change their plans.

Pricing is kept as plain data, separate from the tier rules in
providers.py, so a table refresh never touches the cost logic.
"""

# ---------------------------------------------------------------------------
# VERCEL
# ---------------------------------------------------------------------------
# base: plan fee, functions_per_million: serverless invocations,
# bandwidth_per_gb: egress beyond limit_gb

VERCEL_TIERS: dict[str, dict[str, float]] = {
    "hobby": {"base": 0, "functions_per_million": 0, "bandwidth_per_gb": 0, "limit_gb": 100},
    "pro": {"base": 20, "functions_per_million": 0.4, "bandwidth_per_gb": 0.15, "limit_gb": 1000},
    "enterprise": {"base": 500, "functions_per_million": 0.2, "bandwidth_per_gb": 0.1, "limit_gb": 5000},
}

# Vercel has no database; an external one is assumed past this size
VERCEL_EXTERNAL_DB_THRESHOLD_GB = 5
VERCEL_EXTERNAL_DB_COST = 25
VERCEL_OBJECT_STORAGE_PER_GB = 0.02


# ---------------------------------------------------------------------------
# RAILWAY
# ---------------------------------------------------------------------------

RAILWAY_TIERS: dict[str, dict[str, float]] = {
    "hobby": {"base": 5, "ram_per_gb_hour": 0.000463, "cpu_per_hour": 0.000231, "egress_per_gb": 0.1},
    "pro": {"base": 20, "ram_per_gb_hour": 0.000463, "cpu_per_hour": 0.000231, "egress_per_gb": 0.1},
}

RAILWAY_MIN_RAM_GB = 0.5
RAILWAY_USERS_PER_RAM_GB = 500
RAILWAY_VOLUME_PER_GB = 0.1
RAILWAY_DB_BASE = 10
RAILWAY_DB_PER_GB = 0.5
RAILWAY_DB_MINIMUM = 5


# ---------------------------------------------------------------------------
# SUPABASE
# ---------------------------------------------------------------------------
# db_gb / storage_gb / bandwidth_gb are included allowances

SUPABASE_TIERS: dict[str, dict[str, float]] = {
    "free": {"base": 0, "db_gb": 0.5, "storage_gb": 1, "bandwidth_gb": 2},
    "pro": {
        "base": 25, "db_gb": 8, "storage_gb": 100, "bandwidth_gb": 250,
        "extra_db_per_gb": 0.125, "extra_storage_per_gb": 0.021, "extra_bandwidth_per_gb": 0.09,
    },
    "team": {
        "base": 599, "db_gb": 50, "storage_gb": 500, "bandwidth_gb": 1000,
        "extra_db_per_gb": 0.125, "extra_storage_per_gb": 0.021, "extra_bandwidth_per_gb": 0.09,
    },
}


# ---------------------------------------------------------------------------
# RENDER
# ---------------------------------------------------------------------------

RENDER_TIERS: dict[str, dict[str, float]] = {
    "starter": {"service_base": 7, "db_base": 7, "bandwidth_per_gb": 0.1, "free_bandwidth_gb": 100},
    "standard": {"service_base": 25, "db_base": 25, "bandwidth_per_gb": 0.1, "free_bandwidth_gb": 500},
}

RENDER_DB_PER_GB = 2
RENDER_DISK_PER_GB = 0.15


# ---------------------------------------------------------------------------
# AWS (self-managed)
# ---------------------------------------------------------------------------
# ec2: t3-class instance, rds: db.t3-class instance, s3 / cloudfront per GB

AWS_TIERS: dict[str, dict[str, float]] = {
    "small": {"ec2": 15, "rds": 15, "s3_per_gb": 0.023, "cf_per_gb": 0.085},
    "medium": {"ec2": 50, "rds": 50, "s3_per_gb": 0.023, "cf_per_gb": 0.085},
    "large": {"ec2": 150, "rds": 150, "s3_per_gb": 0.023, "cf_per_gb": 0.075},
}

AWS_RDS_INCLUDED_GB = 20
AWS_RDS_EXTRA_PER_GB = 0.1
AWS_OTHER_MONTHLY = 10  # Route53, CloudWatch, ...

HOURS_PER_MONTH = 730
