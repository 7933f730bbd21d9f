"""
endorsement_service.api.routers

HTTP routers: endorsements, health probes and the dev token helper.
"""
