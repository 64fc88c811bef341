""" All Application Constants declare here... """

# Python Packages
from decouple import config


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "SharkTank Deals",
                                "version": "1.0",
                                "description": "Catalog of deals pitched on the show: \
                                list every deal and register new ones."
                            }


# AWS Constants
AWS_ACCESS_KEY_ID		        =	config('AWS_ACCESS_KEY_ID', default = None)
AWS_SECRET_ACCESS_KEY	        =	config('AWS_SECRET_ACCESS_KEY', default = None)
AWS_REGION				        =	config('AWS_REGION', default = 'us-east-1')
DYNAMODB_TABLE                  =   config('DYNAMODB_TABLE', default = 'sharktank-deals')


# CORS Constants
CORS_ALLOWED_ORIGIN             =   config('CORS_ALLOWED_ORIGIN', default = '*')
CORS_ALLOWED_HEADERS            =   "Content-Type"
CORS_ALLOWED_METHODS            =   "OPTIONS,POST,GET"


# Deal Record Constants
DEAL_ID_SEPARATOR               =   "#"
DEAL_DEFAULT_CATEGORY           =   "-"
DEAL_DEFAULT_PROPOSAL_TYPE      =   "-"


# Catalog Constants
DEALS_API_URL                   =   config('DEALS_API_URL', default = 'http://localhost:5000/deals')
DEALS_API_TIMEOUT               =   config('DEALS_API_TIMEOUT', default = None, cast = lambda v: float(v) if v else None)
CACHE_DIR                       =   config('CACHE_DIR', default = '.sharktank_cache')
CACHE_KEY                       =   "sharktank_data_cache"
CACHE_TIME_KEY                  =   "sharktank_data_cache_time"
CACHE_DURATION_MS               =   config('CACHE_DURATION_MS', default = 24 * 60 * 60 * 1000, cast = int) # 24h
ITEMS_PER_PAGE                  =   config('ITEMS_PER_PAGE', default = 10, cast = int)
PAGE_WINDOW_MAX_PAGES           =   7
PAGE_ELLIPSIS                   =   "..."
