""" SharkTank deals catalog: deals API and client-side catalog... """
