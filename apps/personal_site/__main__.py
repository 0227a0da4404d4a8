from personal_site.site_app import main

if __name__ == '__main__':
    main()
