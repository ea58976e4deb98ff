"""Provenanced option values, deprecated-option rewriting and theme selection."""