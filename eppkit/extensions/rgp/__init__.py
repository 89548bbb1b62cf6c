"""Registry Grace Period (RGP) restore request, report and status."""