"""B2B ordering storefront API with PIX payment codes."""
