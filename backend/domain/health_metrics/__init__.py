"""Health metrics domain: BMI, energy needs, diet plans and advisories."""
