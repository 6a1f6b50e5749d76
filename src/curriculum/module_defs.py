"""
Static module definitions for the curriculum.

Order matters: when two definitions list the same category, the earlier
definition claims the items.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModuleDef:
    """A module template: presentation metadata plus the categories it claims."""

    id: str
    title: str
    description: str
    icon: str
    color: str
    category_patterns: tuple[str, ...]


FALLBACK_MODULE = ModuleDef(
    id="more-topics",
    title="More Topics",
    description="Additional concepts and tools",
    icon="\U0001F4DA",
    color="gray",
    category_patterns=(),
)


MODULE_DEFS: tuple[ModuleDef, ...] = (
    ModuleDef(
        id="python-fundamentals",
        title="Python Fundamentals",
        description="Core Python concepts, libraries, and command-line tools",
        icon="\U0001F40D",
        color="blue",
        category_patterns=(
            "Python Concepts",
            "Python Commands",
            "Python Libraries",
            "Data Processing Python",
        ),
    ),
    ModuleDef(
        id="javascript-deep-dive",
        title="JavaScript Deep Dive",
        description="From basics to advanced JS patterns and data formats",
        icon="⚡",
        color="yellow",
        category_patterns=("JavaScript Concepts", "Javascript Concepts", "Json Concepts"),
    ),
    ModuleDef(
        id="typescript-modern",
        title="TypeScript & Modern Runtimes",
        description="Type safety, Deno, and modern JavaScript tooling",
        icon="\U0001F6E1️",
        color="blue",
        category_patterns=("TypeScript Concepts", "Deno Concepts", "Languages"),
    ),
    ModuleDef(
        id="web-html-css",
        title="HTML & CSS",
        description="Structure, styling, and visual design for the web",
        icon="\U0001F3A8",
        color="pink",
        category_patterns=(
            "HTML Concepts",
            "CSS Concepts",
            "Html5 Concepts",
            "Css Concepts",
            "HTML CSS Concepts",
            "Styling",
            "Theming",
            "UI Component Libraries",
        ),
    ),
    ModuleDef(
        id="react-nextjs",
        title="React & Next.js",
        description="Component-based UI, server rendering, and mobile with Capacitor",
        icon="⚛️",
        color="cyan",
        category_patterns=("React Concepts", "Next.js Concepts", "Capacitor Concepts", "Frameworks"),
    ),
    ModuleDef(
        id="bash-cli",
        title="Bash & Command Line",
        description="Shell scripting, file management, and system commands",
        icon="\U0001F4BB",
        color="green",
        category_patterns=(
            "Bash / Shell Concepts",
            "Bash Commands: File And Navigation",
            "Bash Commands: Networking",
            "Bash Commands: Package Management",
            "Bash Commands: Process And Service",
            "Bash Commands: Ssh",
        ),
    ),
    ModuleDef(
        id="git-github",
        title="Git & GitHub",
        description="Version control, collaboration, CI/CD, and automation",
        icon="\U0001F500",
        color="orange",
        category_patterns=(
            "Bash Commands: Git",
            "Github Concepts",
            "Git And Github",
            "Git Commands",
            "GitHub Concepts",
            "Github Actions",
            "GitHub Actions Workflows",
            "npm Commands",
        ),
    ),
    ModuleDef(
        id="sql-databases",
        title="SQL & Databases",
        description="Relational databases, queries, schema design, and administration",
        icon="\U0001F5C4️",
        color="purple",
        category_patterns=(
            "SQL Concepts",
            "Sql Concepts",
            "Database Tables",
            "Database Administration",
            "PostgreSQL Concepts",
            "Database Patterns",
            "Database Clients",
            "Database: Analytics",
            "Database: Cached Content",
            "Database: Community Content",
            "Database: Core Content",
            "Database: Lens Feature",
            "Database: Relationships",
            "Database: User Progress",
        ),
    ),
    ModuleDef(
        id="networking-http",
        title="Networking & HTTP",
        description="Protocols, REST APIs, and web security fundamentals",
        icon="\U0001F310",
        color="teal",
        category_patterns=("Networking", "Http And Rest", "Security"),
    ),
    ModuleDef(
        id="cloud-infra",
        title="Cloud & Infrastructure",
        description="Cloud platforms, CDNs, serverless, and deployment",
        icon="☁️",
        color="sky",
        category_patterns=(
            "Oracle Cloud Concepts",
            "Vercel Concepts",
            "Cloudflare Concepts",
            "Cloudflare Commands",
            "Cloudflare R2 Concepts",
            "Infrastructure & Services",
            "Platforms & Infrastructure",
            "Serverless",
            "Cloud Storage",
        ),
    ),
    ModuleDef(
        id="linux-admin",
        title="Linux Server Admin",
        description="Server management, processes, and system configuration",
        icon="\U0001F427",
        color="slate",
        category_patterns=("Linux Server Admin",),
    ),
    ModuleDef(
        id="supabase-backend",
        title="Supabase & Backend Services",
        description="Backend-as-a-service, auth, storage, and external APIs",
        icon="\U0001F50C",
        color="emerald",
        category_patterns=(
            "Supabase Concepts",
            "Authentication & Security",
            "Environment Variables",
            "External Services",
            "External APIs",
            "Configuration Files",
        ),
    ),
    ModuleDef(
        id="software-engineering",
        title="Software Engineering",
        description="Design patterns, architecture, and engineering best practices",
        icon="\U0001F3D7️",
        color="amber",
        category_patterns=(
            "Software Engineering",
            "Design Patterns",
            "Architectural Patterns",
            "Domain Concepts",
        ),
    ),
    ModuleDef(
        id="trading-finance",
        title="Trading & Finance",
        description="Market concepts, strategies, risk management, and trading APIs",
        icon="\U0001F4C8",
        color="green",
        category_patterns=(
            "Trading: Fundamentals",
            "Trading: Market Regimes",
            "Trading: Orders",
            "Trading: Performance Metrics",
            "Trading: Risk Management",
            "Trading: Strategies Used",
            "Trading: Technical Indicators",
            "Alpaca API",
        ),
    ),
    ModuleDef(
        id="ai-data",
        title="AI, ML & Data",
        description="Machine learning concepts, data processing, and analytics",
        icon="\U0001F916",
        color="violet",
        category_patterns=("AI And ML", "Ai Ml", "Analytics", "Internationalization"),
    ),
    ModuleDef(
        id="bots-automation",
        title="Bots & Automation",
        description="Telegram bots, YAML config, dev tools, and automation",
        icon="\U0001F916",
        color="rose",
        category_patterns=(
            "Telegram Bot Api API",
            "Telegram Bot Commands",
            "Yaml Concepts",
            "Dev Tools",
        ),
    ),
    ModuleDef(
        id="lessons-learned",
        title="Lessons & Best Practices",
        description="Hard-won lessons from real project experience",
        icon="\U0001F4A1",
        color="yellow",
        category_patterns=("Lessons Learned",),
    ),
)
