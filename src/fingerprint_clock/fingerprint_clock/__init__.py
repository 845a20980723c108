"""Fingerprint time clock package.

Feature modules (fingerprints, employees, enrollment, identification,
attendance, timeclock) sit behind a thin Flask controller layer; services
depend on repository/device protocols, never on MySQL or a scanner directly.
"""
