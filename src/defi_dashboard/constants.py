"""Allow-lists, defaults and placeholder file tables for the dashboard node."""

from __future__ import annotations

# Allow-lists
VALID_THEMES: tuple[str, ...] = ("light", "dark", "auto")
VALID_LAYOUTS: tuple[str, ...] = ("grid", "flex", "tabs")
VALID_COMPONENTS: tuple[str, ...] = (
    "wallet-connector",
    "token-selector",
    "swap-interface",
    "portfolio-tracker",
    "transaction-history",
    "price-charts",
    "limit-orders",
    "fusion-swaps",
    "analytics",
)

# Keys that switch a node into template mode
TEMPLATE_MODE_FLAGS: tuple[str, ...] = ("template_creation_mode", "config_only")
TEMPLATE_MODE_VALUE = "template"

DEFAULT_THEME = "auto"
DEFAULT_LAYOUT = "grid"
DEFAULT_BRAND_NAME = "My 1inch DeFi Suite"
DEFAULT_ID_PREFIX = "dashboard"

DEFAULT_COLORS: dict[str, str] = {
    "primary": "#1f2937",
    "secondary": "#3b82f6",
    "accent": "#8b5cf6",
}

DEFAULT_COMPONENTS: tuple[str, ...] = VALID_COMPONENTS

DEFAULT_FEATURES: tuple[str, ...] = (
    "multi-wallet-support",
    "cross-chain-swaps",
    "mev-protection",
    "gasless-transactions",
    "limit-orders",
    "portfolio-tracking",
    "real-time-prices",
    "transaction-history",
    "advanced-analytics",
)

DEFAULT_WALLETS: tuple[str, ...] = ("metamask", "walletconnect", "coinbase")

# Ethereum, Polygon, Arbitrum, Optimism, BNB Chain, Avalanche
DEFAULT_CHAINS: tuple[int, ...] = (1, 137, 42161, 10, 56, 43114)

TEMPLATE_PROTOCOLS: tuple[str, ...] = (
    "1inch-aggregation",
    "1inch-fusion",
    "1inch-limit-orders",
    "1inch-portfolio",
)

# Execution mode uses a smaller fixed subset
EXECUTION_FEATURES: tuple[str, ...] = DEFAULT_FEATURES[:3]
EXECUTION_WALLETS: tuple[str, ...] = DEFAULT_WALLETS
EXECUTION_CHAINS: tuple[int, ...] = DEFAULT_CHAINS[:4]
EXECUTION_PROTOCOLS: tuple[str, ...] = TEMPLATE_PROTOCOLS[:3]

TEMPLATE_FRONTEND_FILES: tuple[str, ...] = (
    "src/pages/index.tsx",
    "src/components/WalletConnector.tsx",
    "src/components/SwapInterface.tsx",
    "src/components/PortfolioTracker.tsx",
    "src/components/TransactionHistory.tsx",
    "src/hooks/useWallet.ts",
    "src/hooks/use1inch.ts",
    "src/styles/globals.css",
    "package.json",
    "next.config.js",
)

TEMPLATE_BACKEND_FILES: tuple[str, ...] = (
    "src/index.ts",
    "src/routes/swap.ts",
    "src/routes/portfolio.ts",
    "src/services/oneinch.ts",
    "src/middleware/auth.ts",
    "package.json",
    "tsconfig.json",
)

TEMPLATE_CONFIG_FILES: tuple[str, ...] = (
    ".env.example",
    "docker-compose.yml",
    "README.md",
    "deployment.yml",
)

EXECUTION_FRONTEND_FILES: tuple[str, ...] = ("index.tsx", "components/...", "styles/...")
EXECUTION_BACKEND_FILES: tuple[str, ...] = ("index.ts", "routes/...", "services/...")
EXECUTION_CONFIG_FILES: tuple[str, ...] = (".env.example", "README.md", "docker-compose.yml")

SUPPORTED_FEATURES: tuple[str, ...] = (
    "Complete DeFi dashboard generation",
    "Multi-component integration",
    "Responsive design system",
    "Custom branding support",
    "Multi-chain compatibility",
    "Production-ready code generation",
)
