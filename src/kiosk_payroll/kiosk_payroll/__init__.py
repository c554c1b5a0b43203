"""Kiosk Payroll package.

Feature modules (punches, employees, shifts, payroll) turn a snapshot of
clock-in/clock-out punches into a payroll report. Every stage is a plain
function or a small service over repository interfaces; nothing here touches
storage or the network.
"""
