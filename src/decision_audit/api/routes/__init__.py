from decision_audit.api.routes import analyze, health

__all__ = ["analyze", "health"]
