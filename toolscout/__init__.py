"""ToolScout - AI-powered software tool finder."""
