"""
Benchmark reference tables.

Curated usage profiles per product category, compiled from S-1 filings,
OpenView / ChartMogul reports and public company data.

Units:
    avg_session_duration      minutes
    avg_page_size             KB
    storage_per_user          MB (profile, preferences, ...)
    storage_per_content_item  MB (post, product, document, ...)

These are raw dicts on purpose. BenchmarkCatalog turns them into frozen
models and validates them once, at construction.
"""

from typing import Any

# ---------------------------------------------------------------------------
# CATEGORY BENCHMARKS
# ---------------------------------------------------------------------------

APP_BENCHMARKS: tuple[dict[str, Any], ...] = (
    {
        "category": "content-platform",
        "name": "Content Platform",
        "description": "Blogs, news portals, article platforms (Medium, Dev.to, StackOverflow)",
        "read_write_ratio": 0.85,
        "dau_mau_ratio": 0.25,
        "peak_multiplier": 3,
        "avg_requests_per_dau": 45,
        "avg_session_duration": 8,
        "avg_sessions_per_day": 1.5,
        "avg_page_views_per_session": 6,
        "avg_page_size": 150,
        "storage_per_user": 0.5,
        "storage_per_content_item": 0.05,
        "avg_content_items_per_user": 3,
        "typical_features": ("auth", "rich-text-editor", "comments", "search", "notifications", "bookmarks"),
        "real_world_examples": ("Medium", "Dev.to", "Hashnode", "Substack"),
        "data_source": "Medium S-1 analysis, Dev.to public data",
    },
    {
        "category": "marketplace",
        "name": "Marketplace",
        "description": "Buy/sell, rental and service platforms (Airbnb, MercadoLivre, Uber)",
        "read_write_ratio": 0.70,
        "dau_mau_ratio": 0.15,
        "peak_multiplier": 5,
        "avg_requests_per_dau": 120,
        "avg_session_duration": 12,
        "avg_sessions_per_day": 2,
        "avg_page_views_per_session": 15,
        "avg_page_size": 300,
        "storage_per_user": 5,
        "storage_per_content_item": 2,
        "avg_content_items_per_user": 5,
        "typical_features": ("auth", "search", "geo-location", "payments", "reviews", "chat", "notifications", "media-upload"),
        "real_world_examples": ("Airbnb", "MercadoLivre", "OLX", "GetNinjas"),
        "data_source": "Airbnb S-1, Marketplace Pulse reports",
    },
    {
        "category": "saas-b2b",
        "name": "SaaS B2B",
        "description": "Productivity, collaboration and management tools (Notion, Slack, Asana)",
        "read_write_ratio": 0.60,
        "dau_mau_ratio": 0.60,
        "peak_multiplier": 2,
        "avg_requests_per_dau": 200,
        "avg_session_duration": 45,
        "avg_sessions_per_day": 3,
        "avg_page_views_per_session": 25,
        "avg_page_size": 200,
        "storage_per_user": 50,
        "storage_per_content_item": 0.5,
        "avg_content_items_per_user": 100,
        "typical_features": ("auth", "workspaces", "collaboration", "real-time", "rich-text-editor", "file-upload", "integrations", "api"),
        "real_world_examples": ("Notion", "Slack", "Asana", "Linear", "Figma"),
        "data_source": "Asana/Slack S-1, OpenView SaaS Benchmarks 2024",
    },
    {
        "category": "saas-b2c",
        "name": "SaaS B2C",
        "description": "Personal productivity, finance and wellness apps (Todoist, YNAB, Headspace)",
        "read_write_ratio": 0.65,
        "dau_mau_ratio": 0.35,
        "peak_multiplier": 2.5,
        "avg_requests_per_dau": 80,
        "avg_session_duration": 15,
        "avg_sessions_per_day": 2,
        "avg_page_views_per_session": 10,
        "avg_page_size": 120,
        "storage_per_user": 10,
        "storage_per_content_item": 0.1,
        "avg_content_items_per_user": 50,
        "typical_features": ("auth", "sync", "offline", "push-notifications", "reminders", "analytics"),
        "real_world_examples": ("Todoist", "YNAB", "Headspace", "Duolingo"),
        "data_source": "ChartMogul reports, public data",
    },
    {
        "category": "e-commerce",
        "name": "E-commerce",
        "description": "Online stores, D2C brands, online retail",
        "read_write_ratio": 0.90,
        "dau_mau_ratio": 0.10,
        "peak_multiplier": 10,  # Black Friday, flash sales
        "avg_requests_per_dau": 60,
        "avg_session_duration": 8,
        "avg_sessions_per_day": 1.2,
        "avg_page_views_per_session": 12,
        "avg_page_size": 400,  # image heavy
        "storage_per_user": 1,
        "storage_per_content_item": 3,  # products with several photos
        "avg_content_items_per_user": 0,
        "typical_features": ("auth", "search", "cart", "payments", "inventory", "shipping", "reviews", "recommendations"),
        "real_world_examples": ("Shopify stores", "VTEX", "Magento"),
        "data_source": "Shopify Partner benchmarks, NRF data",
    },
    {
        "category": "social-network",
        "name": "Social Network",
        "description": "Social platforms, communities, forums",
        "read_write_ratio": 0.75,
        "dau_mau_ratio": 0.50,
        "peak_multiplier": 3,
        "avg_requests_per_dau": 150,
        "avg_session_duration": 25,
        "avg_sessions_per_day": 5,
        "avg_page_views_per_session": 20,
        "avg_page_size": 250,
        "storage_per_user": 20,
        "storage_per_content_item": 0.3,
        "avg_content_items_per_user": 50,
        "typical_features": ("auth", "feed", "posts", "media-upload", "likes", "comments", "follow", "notifications", "chat", "stories"),
        "real_world_examples": ("Instagram", "Twitter/X", "Discord", "Reddit"),
        "data_source": "Historical Meta S-1, Twitter S-1",
    },
    {
        "category": "fintech",
        "name": "Fintech",
        "description": "Payment, banking and investment apps",
        "read_write_ratio": 0.70,
        "dau_mau_ratio": 0.40,
        "peak_multiplier": 4,
        "avg_requests_per_dau": 50,
        "avg_session_duration": 5,
        "avg_sessions_per_day": 2,
        "avg_page_views_per_session": 8,
        "avg_page_size": 80,
        "storage_per_user": 2,
        "storage_per_content_item": 0.01,  # transactions
        "avg_content_items_per_user": 200,
        "typical_features": ("auth", "kyc", "2fa", "payments", "transfers", "balance", "statements", "notifications", "security"),
        "real_world_examples": ("Nubank", "PicPay", "Stripe Dashboard", "Wise"),
        "data_source": "Nubank S-1, CB Insights fintech reports",
    },
    {
        "category": "edtech",
        "name": "EdTech",
        "description": "Learning platforms, online courses, LMS",
        "read_write_ratio": 0.80,
        "dau_mau_ratio": 0.30,
        "peak_multiplier": 3,
        "avg_requests_per_dau": 100,
        "avg_session_duration": 30,
        "avg_sessions_per_day": 1.5,
        "avg_page_views_per_session": 15,
        "avg_page_size": 500,
        "storage_per_user": 5,
        "storage_per_content_item": 50,  # lecture videos
        "avg_content_items_per_user": 2,
        "typical_features": ("auth", "video-streaming", "progress-tracking", "quizzes", "certificates", "forums", "live-classes"),
        "real_world_examples": ("Coursera", "Udemy", "Hotmart", "Alura"),
        "data_source": "Coursera S-1, Udemy S-1",
    },
    {
        "category": "healthtech",
        "name": "HealthTech",
        "description": "Health, telemedicine and fitness apps",
        "read_write_ratio": 0.65,
        "dau_mau_ratio": 0.35,
        "peak_multiplier": 2,
        "avg_requests_per_dau": 40,
        "avg_session_duration": 10,
        "avg_sessions_per_day": 1.5,
        "avg_page_views_per_session": 8,
        "avg_page_size": 150,
        "storage_per_user": 15,  # medical history, exams
        "storage_per_content_item": 2,
        "avg_content_items_per_user": 20,
        "typical_features": ("auth", "hipaa-compliance", "appointments", "video-calls", "medical-records", "prescriptions", "reminders"),
        "real_world_examples": ("Teladoc", "Doctolib", "Conexa Saude"),
        "data_source": "Teladoc S-1, Rock Health reports",
    },
    {
        "category": "developer-tools",
        "name": "Developer Tools",
        "description": "Developer tooling, APIs, infrastructure",
        "read_write_ratio": 0.50,
        "dau_mau_ratio": 0.55,
        "peak_multiplier": 2,
        "avg_requests_per_dau": 500,
        "avg_session_duration": 60,
        "avg_sessions_per_day": 4,
        "avg_page_views_per_session": 30,
        "avg_page_size": 50,  # light JSON responses
        "storage_per_user": 100,  # logs, builds, artifacts
        "storage_per_content_item": 5,
        "avg_content_items_per_user": 50,
        "typical_features": ("auth", "api-keys", "webhooks", "logs", "analytics", "cli", "sdks", "documentation"),
        "real_world_examples": ("Vercel", "Supabase", "PlanetScale", "Railway"),
        "data_source": "Vercel usage analysis, Supabase docs",
    },
)


# ---------------------------------------------------------------------------
# FEATURES
# ---------------------------------------------------------------------------
# Multipliers are relative: 1.0 = no impact, 1.5 = +50%.

APP_FEATURES: tuple[dict[str, Any], ...] = (
    {
        "id": "auth",
        "name": "Authentication",
        "description": "Login, sign-up, password recovery",
        "impact_on_requests": 1.1,
        "impact_on_storage": 1.05,
        "impact_on_bandwidth": 1.0,
    },
    {
        "id": "real-time",
        "name": "Real-time",
        "description": "WebSockets, live updates",
        "impact_on_requests": 2.0,
        "impact_on_storage": 1.1,
        "impact_on_bandwidth": 1.5,
        "requires_realtime": True,
    },
    {
        "id": "media-upload",
        "name": "Media Upload",
        "description": "Image, video and file uploads",
        "impact_on_requests": 1.2,
        "impact_on_storage": 3.0,
        "impact_on_bandwidth": 2.5,
        "requires_media_upload": True,
    },
    {
        "id": "search",
        "name": "Search",
        "description": "Full-text search, filters",
        "impact_on_requests": 1.3,
        "impact_on_storage": 1.2,
        "impact_on_bandwidth": 1.1,
    },
    {
        "id": "notifications",
        "name": "Notifications",
        "description": "Push, email, in-app",
        "impact_on_requests": 1.15,
        "impact_on_storage": 1.1,
        "impact_on_bandwidth": 1.05,
    },
    {
        "id": "chat",
        "name": "Chat / Messaging",
        "description": "User-to-user messages",
        "impact_on_requests": 1.5,
        "impact_on_storage": 1.3,
        "impact_on_bandwidth": 1.2,
        "requires_realtime": True,
    },
    {
        "id": "payments",
        "name": "Payments",
        "description": "Payment gateway integration",
        "impact_on_requests": 1.1,
        "impact_on_storage": 1.1,
        "impact_on_bandwidth": 1.0,
    },
    {
        "id": "analytics",
        "name": "Analytics",
        "description": "Event tracking, dashboards",
        "impact_on_requests": 1.2,
        "impact_on_storage": 1.5,
        "impact_on_bandwidth": 1.1,
    },
    {
        "id": "video-streaming",
        "name": "Video Streaming",
        "description": "Video player, HLS/DASH",
        "impact_on_requests": 1.3,
        "impact_on_storage": 5.0,
        "impact_on_bandwidth": 10.0,
        "requires_media_upload": True,
    },
    {
        "id": "geo-location",
        "name": "Geolocation",
        "description": "Maps, proximity search",
        "impact_on_requests": 1.2,
        "impact_on_storage": 1.1,
        "impact_on_bandwidth": 1.3,
    },
    {
        "id": "api",
        "name": "Public API",
        "description": "API for external integrations",
        "impact_on_requests": 1.5,
        "impact_on_storage": 1.2,
        "impact_on_bandwidth": 1.3,
    },
    {
        "id": "collaboration",
        "name": "Collaboration",
        "description": "Collaborative editing, workspaces",
        "impact_on_requests": 1.8,
        "impact_on_storage": 1.3,
        "impact_on_bandwidth": 1.4,
        "requires_realtime": True,
    },
)


# ---------------------------------------------------------------------------
# REGIONS
# ---------------------------------------------------------------------------

REGION_PROFILES: tuple[dict[str, Any], ...] = (
    {
        "region": "brazil",
        "peak_hours": {"start": 19, "end": 23},
        "timezone": "America/Sao_Paulo",
        "bandwidth_cost_multiplier": 1.2,
        "latency_requirement": "medium",
    },
    {
        "region": "latam",
        "peak_hours": {"start": 19, "end": 23},
        "timezone": "America/Sao_Paulo",
        "bandwidth_cost_multiplier": 1.3,
        "latency_requirement": "medium",
    },
    {
        "region": "us",
        "peak_hours": {"start": 18, "end": 22},
        "timezone": "America/New_York",
        "bandwidth_cost_multiplier": 1.0,
        "latency_requirement": "low",
    },
    {
        "region": "europe",
        "peak_hours": {"start": 19, "end": 23},
        "timezone": "Europe/London",
        "bandwidth_cost_multiplier": 1.1,
        "latency_requirement": "low",
    },
    {
        "region": "global",
        "peak_hours": {"start": 0, "end": 24},  # always peak somewhere
        "timezone": "UTC",
        "bandwidth_cost_multiplier": 1.0,
        "latency_requirement": "high",  # needs CDN/edge
    },
)
