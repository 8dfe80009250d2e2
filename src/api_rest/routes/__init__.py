from .catalog import router_catalog


__all__ = ["router_catalog"]
