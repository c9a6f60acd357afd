"""shadcn-ui: copy GPUI UI components into a project and keep them in sync."""

__version__ = "0.2.0"
