"""Rudder - Helm chart schema resolution and caching."""
