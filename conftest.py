from shopdisplay import conf

conf.setup()
