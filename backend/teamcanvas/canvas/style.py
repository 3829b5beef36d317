NODE_SIZE_PX = {
    "leader": 80,
    "assistant": 64,
}

# Normalized vertical radius used before the container has been measured
FALLBACK_RADIUS_Y = {
    "leader": 7.5,
    "assistant": 6.2,
}

EDGE_STROKE = {
    "done": "#22C55E",
    "active": "#7C3AED",
    "idle": "#CBD5F5",
}

NODE_RING = {
    "leader": {"width": 4, "color": "#D1FAE5"},
    "assistant": {"width": 2, "color": "#FFFFFF"},
}

DEFAULT_ACCENT = "from-gray-500 to-gray-600"

# Tailwind gradient tokens -> (start, end) hex, used by the SVG renderer
ACCENT_COLORS = {
    "from-emerald-500 to-green-600": ("#10B981", "#16A34A"),
    "from-teal-500 to-emerald-600": ("#14B8A6", "#059669"),
    "from-cyan-500 to-sky-600": ("#06B6D4", "#0284C7"),
    "from-neutral-700 to-neutral-900": ("#404040", "#171717"),
    "from-sky-500 to-blue-600": ("#0EA5E9", "#2563EB"),
    "from-indigo-500 to-purple-600": ("#6366F1", "#9333EA"),
    "from-amber-500 to-orange-500": ("#F59E0B", "#F97316"),
    "from-rose-500 to-pink-500": ("#F43F5E", "#EC4899"),
    "from-violet-500 to-purple-600": ("#8B5CF6", "#9333EA"),
    "from-orange-500 to-amber-600": ("#F97316", "#D97706"),
    "from-slate-500 to-gray-600": ("#64748B", "#4B5563"),
    DEFAULT_ACCENT: ("#6B7280", "#4B5563"),
}

PROVIDER_ACCENTS = {
    "openai": "from-emerald-500 to-green-600",
    "google": "from-sky-500 to-blue-600",
    "xai": "from-neutral-700 to-neutral-900",
    "deepseek": "from-indigo-500 to-purple-600",
    "cohere": "from-amber-500 to-orange-500",
    "bytedance": "from-rose-500 to-pink-500",
    "anthropic": "from-orange-500 to-amber-600",
}

FALLBACK_PROVIDER_ACCENT = "from-slate-500 to-gray-600"

MEMBER_COLORS = ["#7C3AED", "#10B981", "#3B82F6", "#F59E0B", "#EC4899"]

CROWN_COLOR = "#FBBF24"
PROGRESS_BADGE_COLOR = "#10B981"
DONE_BADGE_TEXT = "已完成"
