class HealthService:
    @staticmethod
    def check_health() -> dict:
        # Liveness only; the database is not probed.
        return {"success": True, "data": {"status": "ok"}}
